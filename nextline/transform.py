"""Building new strings from existing ones: splitting, trimming, joining, mapping.

Each function returns a new string rather than changing its arguments.
"""

from __future__ import annotations

from typing import Callable

_NUL = "\0"
_TRIMMED = " \t\n"


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty
    strings. The separator must be a single character other than NUL.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep == _NUL:
        raise ValueError("separator must not be the NUL character")
    return [piece for piece in s.split(sep) if piece]


def trim(s: str) -> str:
    """Remove spaces, tabs and newlines from both ends of s."""
    return s.strip(_TRIMMED)


def substring(s: str, start: int, length: int) -> str:
    """Return the length characters of s beginning at start.

    The range may reach one past the end of s, where the terminator sits;
    the terminator itself adds nothing to the result.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start + length > len(s) + 1:
        raise ValueError(
            f"range {start}..{start + length} lies outside a string of length {len(s)}"
        )
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("join expects two strings")
    return s1 + s2


def concat_n(s1: str, s2: str, n: int) -> str:
    """Return s1 followed by at most the first n characters of s2."""
    _check_count("n", n)
    return s1 + s2[:n]


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest as if dest lived in a buffer of size characters.

    Returns the resulting string and the length the full concatenation
    would have had. The buffer always keeps room for a terminator, so at
    most size - len(dest) - 1 characters of src are appended. When dest
    already fills the buffer it is returned unchanged, and the reported
    length is size + len(src).
    """
    _check_count("size", size)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def pad_copy(src: str, n: int) -> str:
    """Return exactly n characters: src cut to n, padded with NUL characters."""
    _check_count("n", n)
    return src[:n].ljust(n, _NUL)


def map_chars(s: str, f: Callable[[str], str]) -> str:
    """Return the string made of f applied to each character of s."""
    return "".join(f(c) for c in s)


def map_chars_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of f applied to each index and character of s."""
    return "".join(f(i, c) for i, c in enumerate(s))