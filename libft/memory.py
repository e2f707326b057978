"""Byte-buffer operations on mutable byte sequences."""

from __future__ import annotations

import sys

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]


def _check_span(buf, n: int, start: int = 0, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{what} of length {len(buf)} cannot hold {n} bytes at offset {start}"
        )


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(dest, n, what="destination")
    _check_span(src, n, what="source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the bytes were first copied
    to a temporary buffer.
    """
    _check_span(buf, n, dest, "destination")
    _check_span(buf, n, src, "source")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` (mod 256) among the
    first ``n`` bytes of ``data``, or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise OverflowError(f"{count} * {size} bytes is too large to allocate")
    return bytearray(total)