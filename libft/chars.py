"""ASCII character classification and case conversion.

Every function accepts either a single-character string or an integer
character code. Only the ASCII ranges are considered.
"""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _convert(c, code)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _convert(c, code)