"""Read a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Iterator, TextIO, Union

BUFFER_SIZE = 64

Source = Union[int, BinaryIO]


class LineReader:
    """Splits the bytes of a file descriptor or binary stream into lines.

    Data is read in chunks of ``buffer_size`` bytes. Lines are returned
    without their newline; a final line with no newline is still returned.
    """

    def __init__(
        self,
        source: Source,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
        errors: str = "replace",
        trace: TextIO | None = None,
    ) -> None:
        if isinstance(source, int) and not isinstance(source, bool) and source < 0:
            raise ValueError(f"invalid file descriptor: {source}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._source = source
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._errors = errors
        self._trace = trace
        self._stock = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        chunk = self._source.read(self._buffer_size)
        if isinstance(chunk, str):
            return chunk.encode(self._encoding)
        return chunk or b""

    def _log(self, label: str, data: bytes) -> None:
        if self._trace is not None:
            text = data.decode(self._encoding, self._errors)
            self._trace.write(f"\n--{label}\n{text}--{label}\n")

    def _take_line(self, end: int) -> str:
        self._log("STOCK", bytes(self._stock))
        line = bytes(self._stock[:end])
        del self._stock[: end + 1]
        return line.decode(self._encoding, self._errors)

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            end = self._stock.find(b"\n")
            if end != -1:
                return self._take_line(end)
            chunk = self._read_chunk()
            if not chunk:
                break
            self._log("BUFFER", chunk)
            self._stock += chunk
        if self._stock:
            line = bytes(self._stock)
            self._stock.clear()
            return line.decode(self._encoding, self._errors)
        return None

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def main(argv: list[str] | None = None) -> int:
    """Print every line of a file in brackets, then an end marker."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: nextline FILE", file=sys.stderr)
        return 1
    try:
        stream = open(args[0], "rb")
    except OSError as exc:
        print(f"nextline: {exc}", file=sys.stderr)
        return 1
    with stream:
        for line in LineReader(stream):
            print(f"[{line}]")
    print("\nEND OF FILE")
    return 0