import pytest

from minishell.textutil import (
    atoi,
    itoa,
    split,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n+42abc") == atoi("42")
    assert atoi("  -42") == -atoi("42")


def test_atoi_without_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_split_drops_empty_pieces():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split(":::", ":") == []


def test_split_join_round_trip():
    parts = split("a:b:c", ":")
    assert ":".join(parts) == "a:b:c"


def test_split_without_separator_char():
    assert split("abc", "") == ["abc"]


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert strtrim(" hi ", "") == " hi "


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamped_and_past_end():
    assert substr("hello", 3, 100) == "lo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 9, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found():
    assert strnstr("foo bar baz", "bar", 11) == "bar baz"


def test_strnstr_needle_must_fit_within_length():
    assert strnstr("foo bar baz", "bar", 6) is None
    assert strnstr("foo bar baz", "bar", 7) == "bar baz"


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == "abc"


def test_strnstr_absent():
    assert strnstr("abc", "z", 3) is None


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)