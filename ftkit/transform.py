"""Building new strings from old ones: conversion, splitting, joining,
trimming and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"
_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_SIGN = 1 << (_INT_BITS - 1)


def _check_str(value: str, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def _check_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int32(n: int) -> int:
    n %= _INT_RANGE
    return n - _INT_RANGE if n >= _INT_SIGN else n


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped, then one optional ``+`` or ``-`` sign is
    read, then as many ASCII digits as follow. Parsing stops at the first
    other character; a string with no digits gives 0. The result wraps to
    a signed 32-bit integer.
    """
    _check_str(s, "s")
    rest = s.lstrip("".join(_WHITESPACE))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _check_str(s, "s")
    _check_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {len(sep)} characters")
    return [word for word in s.split(sep) if word]


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each character of ``chars`` in place.

    A string returned by ``f`` replaces the character at that index; a
    return of None leaves it unchanged.
    """
    if not callable(f):
        raise TypeError("f must be callable")
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    _check_str(first, "first")
    _check_str(second, "second")
    return first + second


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character."""
    _check_str(s, "s")
    if not callable(f):
        raise TypeError("f must be callable")
    mapped = []
    for index, ch in enumerate(s):
        result = f(index, ch)
        if not isinstance(result, str):
            raise TypeError(
                f"f must return a string, got {type(result).__name__}"
            )
        mapped.append(result)
    return "".join(mapped)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _check_str(s, "s")
    _check_str(charset, "charset")
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    _check_str(s, "s")
    _check_count(start, "start")
    _check_count(length, "length")
    return s[start:start + length]