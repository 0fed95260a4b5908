"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from nextline.chars import itoa

STDOUT = 1


def _write(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(c: str | int, fd: int = STDOUT) -> int:
    """Write one character to fd and return the number of bytes written.

    An int is written as the single byte with that value.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write(fd, c.encode("utf-8"))
    if isinstance(c, int) and not isinstance(c, bool):
        return _write(fd, bytes([c & 0xFF]))
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def put_str(s: str, fd: int = STDOUT) -> int:
    """Write s to fd and return the number of bytes written."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _write(fd, s.encode("utf-8"))


def put_endl(s: str, fd: int = STDOUT) -> int:
    """Write s followed by a newline to fd; return the number of bytes written."""
    return put_str(s, fd) + put_char("\n", fd)


def put_nbr(n: int, fd: int = STDOUT) -> int:
    """Write n in decimal to fd; return the number of bytes written."""
    return put_str(itoa(n), fd)