"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %%.

Each ``format_*`` function renders one conversion as text. ``sformat``
renders a whole format string. ``printf`` writes the result to standard
output and returns the number of characters written.

A ``%`` followed by an unknown conversion character renders as nothing.
The character is still consumed. A lone ``%`` at the very end is written
as it is. Formatting stops at the first NUL in the format string.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .strings import itoa

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_ULLONG_MASK = (1 << 64) - 1

_HEX_DIGITS = {
    "x": "0123456789abcdef",
    "X": "0123456789ABCDEF",
}

_FORMAT_PIECE = re.compile(r"%(.)|%|[^%]+", re.DOTALL)


def _require_int(name: str, n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name}: expected an int, got {type(n).__name__}")
    return n


def _to_int32(n: int) -> int:
    value = n & _UINT_MASK
    if value >= 1 << (_UINT_BITS - 1):
        value -= 1 << _UINT_BITS
    return value


def format_char(c: Union[str, int]) -> str:
    """Render a character; an integer code is taken modulo 256."""
    if isinstance(c, bool):
        raise TypeError("format_char: expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"format_char: expected a single character, got {len(c)}")
        return c
    raise TypeError(
        f"format_char: expected a character or an integer code, got {type(c).__name__}"
    )


def format_str(s: Optional[str]) -> str:
    """Render a string up to its first NUL; None renders as ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"format_str: expected a str or None, got {type(s).__name__}")
    end = s.find("\0")
    return s if end < 0 else s[:end]


def format_int(n: int) -> str:
    """Render ``n`` as a signed 32-bit decimal, wrapping values out of range."""
    return itoa(_to_int32(_require_int("format_int", n)))


def format_unsigned(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit decimal, wrapping values out of range."""
    return str(_require_int("format_unsigned", n) & _UINT_MASK)


def format_hex(num: int, conversion: str) -> str:
    """Render ``num`` as unsigned 64-bit hexadecimal.

    ``conversion`` is ``"x"`` for lowercase digits or ``"X"`` for uppercase.
    """
    digits = _HEX_DIGITS.get(conversion)
    if digits is None:
        raise ValueError(f"format_hex: conversion must be 'x' or 'X', got {conversion!r}")
    value = _require_int("format_hex", num) & _ULLONG_MASK
    out = []
    while True:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
        if not value:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` followed by lowercase hex; None is 0."""
    value = 0 if address is None else _require_int("format_pointer", address)
    return "0x" + format_hex(value, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda v: format_hex(_require_int("format_hex", v) & _UINT_MASK, "x"),
    "X": lambda v: format_hex(_require_int("format_hex", v) & _UINT_MASK, "X"),
    "p": format_pointer,
}


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    render = _CONVERSIONS.get(conversion)
    if render is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return render(value)


def sformat(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text."""
    if not isinstance(fmt, str):
        raise TypeError(f"sformat: expected a str format, got {type(fmt).__name__}")
    end = fmt.find("\0")
    if end >= 0:
        fmt = fmt[:end]
    remaining = iter(args)
    parts = []
    for match in _FORMAT_PIECE.finditer(fmt):
        conversion = match.group(1)
        if conversion is None:
            parts.append(match.group(0))
        else:
            parts.append(_convert(conversion, remaining))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered ``fmt`` to standard output; return its length."""
    text = sformat(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)