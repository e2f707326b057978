"""String utilities: searching, comparing, copying, splitting and
conversions between text and integers.

Search functions return an index, or None when nothing is found. The
bounded copies ``strlcpy`` and ``strlcat`` work on NUL-terminated byte
buffers, the way fixed-size C-style buffers behave.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "atoi",
    "itoa",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _c_bytes(data: str | bytes | bytearray) -> bytes:
    """Return ``data`` as bytes, cut at its first NUL byte."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    nul = raw.find(0)
    return raw if nul < 0 else raw[:nul]


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _as_char(c: int | str) -> str:
    """Return the character ``c`` names, reducing integer codes to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _codes(s: str | bytes) -> list[int]:
    return [ord(ch) for ch in s] if isinstance(s, str) else list(s)


def strlen(s: str | bytes) -> int:
    """Return the length of ``s``."""
    return len(s)


def strlcpy(dest: bytearray, src: str | bytes, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes including
    the terminating NUL.

    Returns the full length of ``src``, so a result of ``size`` or more
    means the copy was truncated.
    """
    _check_count(size, "size")
    data = _c_bytes(src)
    if size > 0:
        count = min(len(data), size - 1)
        if count >= len(dest):
            raise IndexError(
                f"destination of length {len(dest)} cannot hold {count + 1} bytes"
            )
        dest[:count] = data[:count]
        dest[count] = 0
    return len(data)


def strlcat(dest: bytearray | None, src: str | bytes, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` so that the
    result, with its terminator, fits in ``size`` bytes.

    Returns the initial length of ``dest`` (at most ``size``) plus the
    length of ``src``.
    """
    _check_count(size, "size")
    if dest is None and size == 0:
        return 0
    if dest is None:
        raise TypeError("destination buffer is required when size is not zero")
    data = _c_bytes(src)
    limit = min(size, len(dest))
    nul = dest.find(0, 0, limit)
    start = nul if nul >= 0 else limit
    if start < size:
        count = max(0, min(len(data), size - 1 - start))
        end = start + count
        if end >= len(dest):
            raise IndexError(
                f"destination of length {len(dest)} cannot hold {end + 1} bytes"
            )
        dest[start:end] = data[:count]
        dest[end] = 0
    return start + len(data)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first pair of differing character codes,
    the end of a string counting as code 0, or 0 when they match.
    """
    _check_count(n, "n")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of the first occurrence of ``needle`` lying wholly
    within the first ``n`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_count(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return str(s)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start beyond the end gives an empty string; None gives None.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return ``s1`` followed by ``s2``, or None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Remove the characters of ``charset`` from both ends of ``s``.

    Returns None if either argument is None.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Return the string made of ``f(index, char)`` for each character of ``s``.

    Returns None if either argument is None.
    """
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence | None, f: Callable | None) -> None:
    """Call ``f(index, item)`` for each item of ``buf``, in place.

    When ``f`` returns something other than None, that value replaces the
    item. Nothing happens if either argument is None.
    """
    if buf is None or f is None:
        return
    for index, item in enumerate(buf):
        result = f(index, item)
        if result is not None:
            buf[index] = result


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and no digits give 0. The result wraps around to a signed
    32-bit integer.
    """
    rest = s.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)