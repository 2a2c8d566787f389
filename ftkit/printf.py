"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions.

Integer conversions follow C's fixed widths: ``%d`` and ``%i`` treat the
argument as a signed 32-bit int, ``%u``, ``%x`` and ``%X`` as an unsigned
32-bit int and ``%p`` as an unsigned 64-bit address. An unknown conversion
prints nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def to_base(n: int, digits: str) -> str:
    """Write the non-negative integer ``n`` using ``digits`` as the alphabet."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    out = []
    while True:
        n, rest = divmod(n, base)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def _int_arg(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _signed32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c requires a single character")
        return value
    return chr(_int_arg(value, "c"))


def _format_decimal(n: int) -> str:
    n = _signed32(n)
    return "-" + to_base(-n, DECIMAL) if n < 0 else to_base(n, DECIMAL)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _int_arg(value, "p") & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + to_base(address, HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s requires a string, got {type(value).__name__}")
        return value
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return _format_decimal(_int_arg(value, spec))
    unsigned = _int_arg(value, spec) & _UINT_MASK
    if spec == "u":
        return to_base(unsigned, DECIMAL)
    return to_base(unsigned, HEX_LOWER if spec == "x" else HEX_UPPER)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    remaining = iter(args)
    parts = []
    pieces = iter(fmt)
    for ch in pieces:
        if ch == "%":
            parts.append(_convert(next(pieces, ""), remaining))
        else:
            parts.append(ch)
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Format like ``format_string``, write to standard output and return
    the number of characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)