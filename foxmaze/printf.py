"""A small printf-style formatter supporting %c %s %u %d %i %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_MISSING = object()


def to_base(num: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two symbols")
    if num < 0:
        raise ValueError("cannot convert a negative number")
    out = []
    while True:
        num, remainder = divmod(num, base)
        out.append(digits[remainder])
        if num == 0:
            break
    return "".join(reversed(out))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{n:d}"


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULONG_MASK
    return "0x" + to_base(address, HEX_LOWER)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return NULL_STRING if value is None else str(value)
    if spec == "u":
        return itoa(int(value) & _UINT_MASK)
    if spec in ("d", "i"):
        return itoa(_as_int32(int(value)))
    if spec == "x":
        return to_base(int(value) & _UINT_MASK, HEX_LOWER)
    if spec == "X":
        return to_base(int(value) & _UINT_MASK, HEX_UPPER)
    if spec == "p":
        return _pointer(value)
    raise ValueError(f"unsupported conversion: %{spec}")


_CONVERSIONS = frozenset("csudixXp")


def format_text(text: str, *args: Any) -> str:
    """Expand the conversions in ``text`` with ``args`` and return the result.

    Unknown conversions and a trailing lone ``%`` produce no output.
    """
    values: Iterator[Any] = iter(args)
    chars = iter(text)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            value = next(values, _MISSING)
            if value is _MISSING:
                raise TypeError("not enough arguments for format string")
            out.append(_convert(spec, value))
    return "".join(out)


def printf(text: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    result = format_text(text, *args)
    target = sys.stdout if stream is None else stream
    target.write(result)
    return len(result)