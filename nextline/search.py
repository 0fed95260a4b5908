"""Comparison and searching over strings, with C-string semantics.

The end of a string behaves like a terminating NUL character: comparisons
treat the shorter string as continuing with a NUL, and stop once both
strings have reached one.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator

_NUL = "\0"


def _as_char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _pairs(s1: str, s2: str) -> Iterator[tuple[str, str]]:
    """Yield aligned character pairs until both strings have terminated."""
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a == _NUL and b == _NUL:
            return
        yield a, b


def compare(s1: str, s2: str) -> int:
    """Return the difference of the first differing characters, or 0."""
    for a, b in _pairs(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like compare, looking at no more than the first n characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(_pairs(s1, s2), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_char(s: str, c: str | int) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def rfind_char(s: str, c: str | int) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def find(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of needle in haystack, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def find_n(haystack: str, needle: str, n: int) -> int | None:
    """Like find, but the match must lie within the first n characters.

    An empty needle is found at index 0 whatever n is.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def equal(s1: str | None, s2: str | None) -> bool:
    """True when both strings are equal; two missing strings are equal."""
    if s1 is None and s2 is None:
        return True
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: str | None, s2: str | None, n: int) -> bool:
    """True when the first n characters are equal; a missing string never is."""
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0