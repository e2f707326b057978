import pytest

from libft.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_matches_len():
    for s in ["", "a", "hello world"]:
        assert strlen(s) == len(s)


def test_strlcpy_truncates_and_terminates():
    dest = bytearray(10)
    assert strlcpy(dest, "hello", 4) == len("hello")
    assert dest[:4] == b"hel\x00"


def test_strlcpy_full_copy():
    dest = bytearray(b"x" * 10)
    assert strlcpy(dest, "hello", 10) == len("hello")
    assert dest[:6] == b"hello\x00"
    assert dest[6:] == b"xxxx"


def test_strlcpy_size_zero_writes_nothing():
    dest = bytearray(b"abc")
    assert strlcpy(dest, "hello", 0) == len("hello")
    assert dest == bytearray(b"abc")


def test_strlcpy_destination_too_small():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), "hello", 10)


def test_strlcat_appends_within_size():
    dest = bytearray(b"ab\x00" + bytes(7))
    assert strlcat(dest, "cdef", 5) == len("ab") + len("cdef")
    assert dest[:5] == b"abcd\x00"


def test_strlcat_full_append():
    dest = bytearray(b"ab\x00" + bytes(7))
    assert strlcat(dest, "cd", 10) == len("abcd")
    assert dest[:5] == b"abcd\x00"


def test_strlcat_size_smaller_than_dest_string():
    dest = bytearray(b"abcdef\x00\x00")
    assert strlcat(dest, "xyz", 3) == 3 + len("xyz")
    assert dest == bytearray(b"abcdef\x00\x00")


def test_strlcat_none_dest_with_zero_size():
    assert strlcat(None, "abc", 0) == 0


def test_strchr_and_strrchr():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strrchr(s, "a") == s.rindex("a")
    assert strchr(s, "z") is None
    assert strrchr(s, "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", 0) == len("abc")


def test_strchr_int_code_truncated_to_byte():
    assert strchr("xyz", ord("y") + 256) == 1


def test_strncmp_results():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("same", "same", 100) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 5) == -strncmp("help", "hello", 5)


def test_strnstr_respects_bound():
    haystack = "lorem ipsum dolor"
    found = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[found:found + len("ipsum")] == "ipsum"
    assert strnstr(haystack, "ipsum", found + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", found + len("ipsum")) == found


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strdup_equal_copy():
    assert strdup("hello") == "hello"
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_cases():
    assert substr("hello world", 6, 100) == "world"
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 3) == ""
    assert substr(None, 0, 3) is None
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_cases():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None


def test_strtrim_cases():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim(None, "x") is None


def test_split_drops_empty_fields():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("abc", "\0") == ["abc"]


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_striteri_modifies_in_place():
    buf = list("abcd")
    striteri(buf, lambda i, ch: ch.upper() if i % 2 else None)
    assert buf == list("aBcD")


def test_striteri_on_bytearray():
    buf = bytearray(b"abc")
    striteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"ABC")


def test_atoi_parsing():
    assert atoi("  -42abc") == -42
    assert atoi("\t\n+17") == 17
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_itoa_atoi_round_trip():
    for n in [0, 7, -7, 123456, -2147483648, 2147483647]:
        assert atoi(itoa(n)) == n


def test_itoa_values_and_errors():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"
    with pytest.raises(TypeError):
        itoa("12")