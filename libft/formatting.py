"""A small printf: conversions %c %s %d %i %u %p %x %X and %%.

``render`` builds the formatted text; ``printf`` writes it to standard
output and returns the number of bytes written.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from libft.output import putstr_fd

__all__ = [
    "render",
    "printf",
    "format_char",
    "format_str",
    "format_decimal",
    "format_unsigned",
    "format_pointer",
    "format_hex",
]

_STDOUT = 1
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >> 31 else n


def format_char(c: int | str) -> str:
    """Return the character ``c``; an integer code is taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def format_str(s: str | None) -> str:
    """Return ``s``, or ``(null)`` for None."""
    return _NULL_STRING if s is None else str(s)


def format_decimal(n: int) -> str:
    """Return ``n`` as a signed 32-bit decimal integer."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Return ``n`` as an unsigned 32-bit decimal integer."""
    return str(n & _UINT_MASK)


def format_pointer(ptr: int | None) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    if not ptr:
        return _NULL_POINTER
    return f"0x{ptr & _POINTER_MASK:x}"


def format_hex(n: int, spec: str) -> str:
    """Return ``n`` as unsigned 32-bit hex; ``spec`` 'x' or 'X' picks the case."""
    if spec == "x":
        return f"{n & _UINT_MASK:x}"
    if spec == "X":
        return f"{n & _UINT_MASK:X}"
    raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return format_char(_next_arg(args, spec))
    if spec == "s":
        return format_str(_next_arg(args, spec))
    if spec in ("d", "i"):
        return format_decimal(_next_arg(args, spec))
    if spec == "u":
        return format_unsigned(_next_arg(args, spec))
    if spec == "p":
        return format_pointer(_next_arg(args, spec))
    if spec in ("x", "X"):
        return format_hex(_next_arg(args, spec), spec)
    # Unknown conversions, and a lone trailing '%', produce nothing.
    return ""


def render(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = render(fmt, *args)
    putstr_fd(text, _STDOUT)
    return len(text.encode())