import io
import os

import pytest

from nextline.reader import LineReader, main


def _lines(data: bytes, buffer_size: int = 64) -> list:
    return list(LineReader(io.BytesIO(data), buffer_size=buffer_size))


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 1000])
def test_lines_independent_of_buffer_size(size):
    data = b"first line\nsecond\n\nfourth after blank\nlast without newline"
    assert _lines(data, size) == data.decode().split("\n")


@pytest.mark.parametrize("size", [1, 5, 64])
def test_trailing_newline_gives_no_extra_line(size):
    data = b"alpha\nbeta\n"
    assert _lines(data, size) == ["alpha", "beta"]


def test_empty_lines_are_kept():
    assert _lines(b"\n\n\n") == ["", "", ""]


def test_empty_stream_has_no_lines():
    assert _lines(b"") == []


def test_read_line_returns_none_repeatedly_at_end():
    reader = LineReader(io.BytesIO(b"only"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_long_line_spanning_many_buffers():
    line = "x" * 500
    data = (line + "\n" + line).encode()
    assert _lines(data, 3) == [line, line]


def test_join_round_trip():
    text = "a\nbb\n\nccc\nd"
    assert "\n".join(_lines(text.encode(), 2)) == text


def test_reads_from_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"one\ntwo\n")
        os.close(write_fd)
        write_fd = -1
        assert list(LineReader(read_fd, buffer_size=4)) == ["one", "two"]
    finally:
        os.close(read_fd)
        if write_fd >= 0:
            os.close(write_fd)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size=size)


def test_utf8_split_across_buffers():
    text = "héllo\nwörld"
    assert _lines(text.encode("utf-8"), 1) == ["héllo", "wörld"]


def test_trace_reports_buffers_and_stock():
    trace = io.StringIO()
    reader = LineReader(io.BytesIO(b"ab\ncd"), buffer_size=64, trace=trace)
    assert reader.read_line() == "ab"
    log = trace.getvalue()
    assert "--BUFFER\nab\ncd--BUFFER" in log
    assert "--STOCK\nab\ncd--STOCK" in log


def test_main_prints_bracketed_lines(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(b"hello\n\nworld")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == "[hello]\n[]\n[world]\n\nEND OF FILE\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "nextline" in capsys.readouterr().err


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err