"""Byte-buffer operations: filling, copying, moving, searching and comparing.

Destination buffers are mutable byte sequences (``bytearray`` or a writable
``memoryview``) and are changed in place. Sources may be any bytes-like
object. A count that reaches past the end of a buffer raises ``ValueError``
instead of touching memory it does not own.
"""

from __future__ import annotations

from typing import Union

MutableBuffer = Union[bytearray, memoryview]
Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"n={n} exceeds a buffer of length {len(buf)}")


def _check_span(buf: Buffer, offset: int, n: int) -> None:
    if offset < 0:
        raise ValueError("offset must not be negative")
    if offset + n > len(buf):
        raise ValueError(
            f"range {offset}..{offset + n} lies outside a buffer of length {len(buf)}"
        )


def mem_set(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Set the first n bytes of buf to the low byte of c; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def zero(buf: MutableBuffer, n: int) -> MutableBuffer:
    """Set the first n bytes of buf to zero; return buf."""
    return mem_set(buf, 0, n)


def mem_copy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first n bytes of src to the start of dst; return dst."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def mem_ccopy(dst: MutableBuffer, src: Buffer, c: int, n: int) -> int | None:
    """Copy bytes from src to dst, stopping after the first byte equal to c.

    At most n bytes are copied. Returns the index in dst just past the copied
    c, or None when c did not occur within the first n bytes of src (in which
    case all n bytes have been copied).
    """
    _check_count(n, dst, src)
    target = c & 0xFF
    head = bytes(src[:n])
    found = head.find(target)
    if found < 0:
        dst[:n] = head
        return None
    end = found + 1
    dst[:end] = head[:end]
    return end


def mem_move(buf: MutableBuffer, dst: int, src: int, n: int) -> MutableBuffer:
    """Copy n bytes within buf from offset src to offset dst; return buf.

    The two ranges may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    _check_span(buf, src, n)
    _check_span(buf, dst, n)
    if dst != src:
        buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def mem_chr(data: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c within n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_cmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0