# nextline

`nextline` reads a file descriptor or a binary stream one line at a time
through a fixed-size buffer. It also has a handful of small helpers for
characters, strings, byte buffers and writing to descriptors.

## Installing

```
pip install .
```

## Reading lines

`nextline.reader.LineReader` takes either an open file descriptor (an `int`)
or a binary stream with a `read` method. It reads the data in chunks of
`buffer_size` bytes, which defaults to `BUFFER_SIZE`, that is 64.

- `read_line()` returns the next line without its trailing newline.
- It returns `None` once the input is used up.
- A final line that has no newline is still returned.
- Iterating over the reader yields every remaining line.

```python
import os
from nextline.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line)
finally:
    os.close(fd)
```

The reader works on bytes. Each line is decoded with `encoding`, which
defaults to `"utf-8"`, using the `errors` handler, which defaults to
`"replace"`.

If you pass a text stream as `trace`, the reader writes each chunk it reads
there between `--BUFFER` markers. It also writes what it holds between
`--STOCK` markers each time it takes a line that ends in a newline.

Errors:

- A negative descriptor raises `ValueError`.
- A `buffer_size` that is not positive raises `ValueError`.
- A failed read raises the `OSError` from the operating system.

## Command line

```
nextline notes.txt
```

This prints each line of the file between square brackets, then a blank line
and `END OF FILE`. If no file is given, it prints a usage message to standard
error and exits with status 1. If the file cannot be opened, it prints the
error to standard error and exits with status 1. The same function is
available as `nextline.reader.main(argv=None)`.

## Helpers

### `nextline.chars`

- `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`: ASCII
  classification. Each takes a one-character string or an integer code.
- `to_lower`, `to_upper`: change the case of ASCII letters only. They return
  the same kind of value they were given.
- `atoi(text)`: parses a leading decimal integer.
  - Leading whitespace and one optional sign are skipped.
  - Parsing stops at the first non-digit.
  - The result wraps to a signed 32-bit value.
  - If the magnitude reaches 9223372036854775807, the result is -1 for a
    positive number and 0 for a negative one.
- `itoa(n)`: renders an integer in decimal.

### `nextline.search`

Comparisons treat the end of a string like a terminating NUL character.

- `compare`, `compare_n`: return the difference of the first differing
  characters, or 0.
- `find_char`, `rfind_char`, `find`, `find_n`: return an index, or `None`
  when there is no match.
- `equal`, `equal_n`: return a `bool`. They also accept `None`.

### `nextline.transform`

These functions always return new strings.

- `split(s, sep)`: splits on one character and drops empty pieces.
- `trim(s)`: strips spaces, tabs and newlines from both ends.
- `substring(s, start, length)`: returns `length` characters starting at
  `start`.
- `join(s1, s2)`: returns `s1` followed by `s2`.
- `concat_n(s1, s2, n)`: appends at most `n` characters of `s2` to `s1`.
- `bounded_concat(dest, src, size)`: returns `(result, full_length)`, with
  `dest` treated as living in a buffer of `size` characters.
- `pad_copy(src, n)`: returns exactly `n` characters, padded with NUL.
- `map_chars(s, f)`, `map_chars_indexed(s, f)`: apply `f` to each character.

### `nextline.memory`

These work on `bytearray` or writable `memoryview` buffers.

- `mem_set`, `zero`, `mem_copy`, `mem_ccopy`, `mem_move`: change the
  destination buffer in place.
- `mem_chr`: returns an index, or `None` when the byte is not found.
- `mem_cmp`: returns the difference of the first differing bytes, or 0.

A count that runs past the end of a buffer raises `ValueError`.

### `nextline.output`

- `put_char`, `put_str`, `put_endl`, `put_nbr`: write to a file descriptor,
  standard output by default. Each returns the number of bytes written.

### Examples

```python
from nextline.chars import atoi, itoa
from nextline.transform import split, trim

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("**a*b**c*", "*")   # ["a", "b", "c"]
trim("\t hello \n")       # "hello"
```

## Running the tests

```
pip install .[test]
pytest
```