"""Byte-buffer operations: filling, copying, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers that are only read may be any bytes-like object.
Byte values are reduced to their low eight bits, as a C ``unsigned char``
would be. A size that reaches past the end of a buffer is an error.
"""

from __future__ import annotations

import sys
from typing import Optional

_BYTE_MASK = 0xFF


def _check_size(size: int, *buffers) -> None:
    """Raise if ``size`` is negative or longer than any of ``buffers``."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for buffer in buffers:
        if size > len(buffer):
            raise ValueError(
                f"size {size} exceeds buffer length {len(buffer)}"
            )


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte value must be an integer, got {type(value).__name__}")
    return value & _BYTE_MASK


def memset(buffer, value: int, size: int):
    """Set the first ``size`` bytes of ``buffer`` to ``value`` and return it."""
    _check_size(size, buffer)
    buffer[:size] = bytes([_byte(value)]) * size
    return buffer


def bzero(buffer, size: int) -> None:
    """Set the first ``size`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, size)


def memcpy(dst, src, size: int):
    """Copy the first ``size`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_size(size, dst, src)
    dst[:size] = bytes(src[:size])
    return dst


def memmove(buffer, dst_offset: int, src_offset: int, size: int):
    """Copy ``size`` bytes inside ``buffer`` from one offset to another.

    The regions may overlap; the result is as if the source bytes were
    copied out first. Returns ``buffer``.
    """
    for name, offset in (("dst_offset", dst_offset), ("src_offset", src_offset)):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"{name} must be an integer, got {type(offset).__name__}")
        if offset < 0:
            raise ValueError(f"{name} must not be negative, got {offset}")
    _check_size(size)
    end = max(dst_offset, src_offset) + size
    if end > len(buffer):
        raise ValueError(f"region ending at {end} exceeds buffer length {len(buffer)}")
    buffer[dst_offset:dst_offset + size] = bytes(buffer[src_offset:src_offset + size])
    return buffer


def memchr(data, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first
    ``size`` bytes of ``data``, or None if there is none."""
    _check_size(size, data)
    index = bytes(data[:size]).find(_byte(value))
    return None if index < 0 else index


def memcmp(first, second, size: int) -> int:
    """Compare the first ``size`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ,
    or 0 when the compared regions are equal.
    """
    _check_size(size, first, second)
    left = bytes(first[:size])
    right = bytes(second[:size])
    return next((a - b for a, b in zip(left, right) if a != b), 0)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    for name, number in (("count", count), ("size", size)):
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"{name} must be an integer, got {type(number).__name__}")
        if number < 0:
            raise ValueError(f"{name} must not be negative, got {number}")
    if size != 0 and count > sys.maxsize // size:
        raise OverflowError(f"{count} elements of {size} bytes is too large")
    return bytearray(count * size)