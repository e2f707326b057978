"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 5
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Read lines from a file descriptor, ``buffer_size`` bytes per read.

    Each line keeps its trailing newline; the last line of the input may
    lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> str | None:
        """Return the next line, or None when the input is exhausted."""
        newline = self._pending.find(b"\n")
        while newline < 0:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            offset = len(self._pending)
            self._pending += chunk
            found = chunk.find(b"\n")
            if found >= 0:
                newline = offset + found
        if not self._pending:
            return None
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(_ENCODING, _ERRORS)

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line from ``fd``, or None at the end of input.

    Unread data is kept between calls for each descriptor.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    line = reader.read_line()
    if line is None:
        _readers.pop(fd, None)
    return line