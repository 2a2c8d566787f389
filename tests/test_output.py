import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def stream():
    return io.StringIO()


def test_put_char_writes_one_character(stream):
    put_char("x", stream)
    put_char("y", stream)
    assert stream.getvalue() == "xy"


def test_put_char_rejects_longer_string(stream):
    with pytest.raises(ValueError):
        put_char("ab", stream)
    assert stream.getvalue() == ""


def test_put_char_rejects_non_string(stream):
    with pytest.raises(TypeError):
        put_char(65, stream)


def test_put_str_writes_whole_string(stream):
    put_str("hello there", stream)
    assert stream.getvalue() == "hello there"


def test_put_str_empty_writes_nothing(stream):
    put_str("", stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline(stream):
    put_endl("Hello, world!", stream)
    assert stream.getvalue() == "Hello, world!\n"


def test_put_endl_empty_is_just_newline(stream):
    put_endl("", stream)
    assert stream.getvalue() == "\n"


def test_put_nbr_smallest_int(stream):
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 10, -1, 2147483647, -456, 123])
def test_put_nbr_round_trip(stream, n):
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n


def test_put_nbr_has_no_padding(stream):
    put_nbr(42, stream)
    text = stream.getvalue()
    assert text.strip() == text
    assert text.isdigit()


def test_put_nbr_rejects_non_integer(stream):
    with pytest.raises(TypeError):
        put_nbr(1.5, stream)
    with pytest.raises(TypeError):
        put_nbr("12", stream)


def test_put_str_rejects_non_string(stream):
    with pytest.raises(TypeError):
        put_str(None, stream)