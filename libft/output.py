"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for None or descriptor 0."""
    if s is None or fd == 0:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline; nothing for None or descriptor 0."""
    if s is None or fd == 0:
        return
    _write_all(fd, (s + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode())