import pytest

from ftkit.chars import to_upper
from ftkit.transform import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


# atoi

@pytest.mark.parametrize(
    "text, expected",
    [
        ("   \t \r \f -1234ab567", -1234),
        ("   \t \r \f +1234ab567", 1234),
        ("   \t \r \f ---+--+1234ab567", 0),
        ("", 0),
        ("abc", 0),
    ],
)
def test_atoi_examples(text, expected):
    assert atoi(text) == expected


def test_atoi_skips_newline_and_vertical_tab():
    assert atoi("\n\v42") == 42


def test_atoi_stops_at_non_ascii_digit():
    assert atoi("12\u0663") == 12


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(42)


# itoa

@pytest.mark.parametrize(
    "n, expected",
    [
        (123, "123"),
        (-456, "-456"),
        (0, "0"),
        (2147483647, "2147483647"),
        (-2147483648, "-2147483648"),
    ],
)
def test_itoa_examples(n, expected):
    assert itoa(n) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 123, -456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_bool():
    with pytest.raises(TypeError):
        itoa(True)


# split

def test_split_example():
    assert split("Hello World 42 School", " ") == ["Hello", "World", "42", "School"]


def test_split_drops_empty_pieces():
    words = split("  Hello   World ", " ")
    assert words == ["Hello", "World"]
    assert all(words)


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_no_separator_gives_whole_string():
    assert split("Hello", " ") == ["Hello"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


# striteri

def test_striteri_upper_in_place():
    chars = list("hello world!")
    striteri(chars, lambda i, c: to_upper(c))
    assert "".join(chars) == "hello world!".upper()


def test_striteri_none_leaves_character_and_indices_are_passed():
    chars = list("abc")
    seen = []

    def record(i, c):
        seen.append((i, c))
        return None

    striteri(chars, record)
    assert chars == ["a", "b", "c"]
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_rejects_non_callable():
    with pytest.raises(TypeError):
        striteri(list("abc"), None)


# strjoin

def test_strjoin_example():
    assert strjoin("Hello, ", "world!") == "Hello, world!"


def test_strjoin_empty_parts():
    assert strjoin("", "world!") == "world!"
    assert strjoin("Hello, ", "") == "Hello, "


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


# strmapi

def test_strmapi_upper():
    s = "Hello World!"
    assert strmapi(s, lambda i, c: to_upper(c)) == s.upper()


def test_strmapi_passes_indices_and_keeps_original():
    s = "abc"
    result = strmapi(s, lambda i, c: str(i))
    assert result == "012"
    assert s == "abc"


def test_strmapi_rejects_non_string_result():
    with pytest.raises(TypeError):
        strmapi("abc", lambda i, c: i)


# strtrim

def test_strtrim_example():
    assert strtrim("--**C Programming**--", "-*") == "C Programming"


def test_strtrim_everything_trimmed():
    assert strtrim("-*-*", "-*") == ""
    assert strtrim("", "-*") == ""


def test_strtrim_empty_charset_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


# substr

def test_substr_example():
    assert substr("Hello, world!", 7, 5) == "world"


def test_substr_start_past_end():
    assert substr("Hello", 5, 3) == ""
    assert substr("Hello", 10, 3) == ""


def test_substr_length_clamped():
    assert substr("Hello", 2, 100) == "llo"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)
    with pytest.raises(ValueError):
        substr("Hello", 0, -2)