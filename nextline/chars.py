"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \f\n\r\t\v")
_DIGITS = "0123456789"
_LLONG_MAX = 9223372036854775807
_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space through tilde."""
    code = _code(c)
    return ord(" ") <= code <= ord("~")


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit. Once the accumulated magnitude reaches
    9223372036854775807 the result is -1 for a positive number and 0 for a
    negative one. Otherwise the result wraps to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1

    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = (value * 10 + _DIGITS.index(text[pos])) & _U64_MASK
        pos += 1
        if value >= _LLONG_MAX:
            return -1 if sign == 1 else 0

    result = (sign * value) & _U32_MASK
    return result - (1 << 32) if result & (1 << 31) else result


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits