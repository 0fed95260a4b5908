import pytest

from nextline.memory import (
    mem_ccopy,
    mem_chr,
    mem_cmp,
    mem_copy,
    mem_move,
    mem_set,
    zero,
)


def test_mem_set_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = mem_set(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"x" * 3
    assert buf[3:] == b"def"


def test_mem_set_uses_low_byte():
    buf = bytearray(4)
    mem_set(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_mem_set_zero_count_leaves_buffer():
    buf = bytearray(b"keep")
    mem_set(buf, ord("z"), 0)
    assert buf == bytearray(b"keep")


def test_mem_set_too_long_raises():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, 3)


def test_mem_set_negative_raises():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, -1)


def test_zero_clears_prefix():
    buf = bytearray(b"hello")
    zero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"llo"


def test_zero_works_on_memoryview():
    backing = bytearray(b"abcd")
    zero(memoryview(backing)[1:], 2)
    assert backing[0:1] == b"a"
    assert backing[1:3] == bytes(2)
    assert backing[3:] == b"d"


def test_mem_copy_copies_prefix():
    dst = bytearray(8)
    src = b"copyme!!"
    result = mem_copy(dst, src, 6)
    assert result is dst
    assert dst[:6] == src[:6]
    assert dst[6:] == bytes(2)


def test_mem_copy_rejects_short_source():
    with pytest.raises(ValueError):
        mem_copy(bytearray(10), b"abc", 5)


def test_mem_copy_rejects_short_destination():
    with pytest.raises(ValueError):
        mem_copy(bytearray(2), b"abcdef", 5)


def test_mem_ccopy_stops_after_delimiter():
    src = b"hello world"
    dst = bytearray(len(src))
    end = mem_ccopy(dst, src, ord(" "), len(src))
    assert end == src.index(b" ") + 1
    assert dst[:end] == src[:end]
    assert dst[end - 1] == ord(" ")
    assert dst[end:] == bytes(len(src) - end)


def test_mem_ccopy_without_delimiter_copies_all():
    src = b"abcdef"
    dst = bytearray(6)
    assert mem_ccopy(dst, src, ord("z"), 4) is None
    assert dst[:4] == src[:4]
    assert dst[4:] == bytes(2)


def test_mem_ccopy_delimiter_beyond_count_not_found():
    src = b"abcdef"
    dst = bytearray(6)
    assert mem_ccopy(dst, src, ord("f"), 3) is None


def test_mem_move_forward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    mem_move(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    mem_move(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_mem_move_same_offset_is_noop():
    buf = bytearray(b"stay")
    assert mem_move(buf, 1, 1, 3) == bytearray(b"stay")


def test_mem_move_out_of_range_raises():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_mem_chr_finds_first():
    data = b"banana"
    assert mem_chr(data, ord("a"), len(data)) == data.index(b"a")


def test_mem_chr_respects_count():
    assert mem_chr(b"banana", ord("n"), 2) is None


def test_mem_chr_finds_zero_byte():
    data = b"ab\0cd"
    assert mem_chr(data, 0, len(data)) == data.index(b"\0")


def test_mem_cmp_equal_prefix():
    assert mem_cmp(b"abcX", b"abcY", 3) == 0


def test_mem_cmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert mem_cmp(a, b, 3) < 0
    assert mem_cmp(b, a, 3) == -mem_cmp(a, b, 3)


def test_mem_cmp_bytes_are_unsigned():
    assert mem_cmp(b"\xff", b"\x01", 1) > 0


def test_mem_cmp_zero_count():
    assert mem_cmp(b"a", b"b", 0) == 0