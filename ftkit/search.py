"""Measuring, searching, comparing and bounded copying of strings.

Positions are returned as indices into the string, or None when nothing
is found. Searching for the terminator ``"\\0"`` finds the end of the
string, at index ``len(s)``.

The bounded copy functions ``strlcpy`` and ``strlcat`` write into a
mutable sequence (a ``list`` of characters, or a ``bytearray`` when the
source is bytes) whose length is the current length of the string held.
"""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence

_TERMINATOR = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"expected a one-character string or an integer, got {type(c).__name__}"
    )


def _check_str(s: str, name: str = "s") -> None:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a string, got {type(s).__name__}")


def _check_count(n: int, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    _check_str(s)
    return len(s)


def strchr(s: str, c: str | int) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None."""
    _check_str(s)
    target = _char(c)
    if target == _TERMINATOR:
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None."""
    _check_str(s)
    target = _char(c)
    if target == _TERMINATOR:
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference between the code points of the first pair that
    differ, the end of a string counting as code point 0; returns 0 when
    the compared parts are equal.
    """
    _check_str(first, "first")
    _check_str(second, "second")
    _check_count(n, "n")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``length`` characters
    of ``haystack``, or None. An empty needle is found at index 0."""
    _check_str(haystack, "haystack")
    _check_str(needle, "needle")
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dst: MutableSequence, src: Sequence, size: int) -> int:
    """Replace the contents of ``dst`` with at most ``size - 1`` characters
    of ``src``.

    Nothing is written when ``size`` is 0. Returns the length of ``src``,
    so a result of ``size`` or more means the copy was truncated.
    """
    _check_count(size, "size")
    if size > 0:
        dst[:] = src[: size - 1]
    return len(src)


def strlcat(dst: MutableSequence, src: Sequence, size: int) -> int:
    """Append ``src`` to ``dst`` so that the result holds at most
    ``size - 1`` characters.

    Returns the length the full concatenation would have; when ``size``
    does not exceed the current length of ``dst``, nothing is appended and
    ``size + len(src)`` is returned.
    """
    _check_count(size, "size")
    current = len(dst)
    if size <= current:
        return size + len(src)
    dst.extend(src[: size - 1 - current])
    return current + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    _check_str(s)
    return "".join(s)