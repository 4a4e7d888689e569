"""Writing characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

Char = Union[str, int]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: Char) -> bytes:
    if isinstance(c, bool):
        raise TypeError("expected a character or a byte value, got bool")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    raise TypeError(f"expected a character or a byte value, got {type(c).__name__}")


def _text_bytes(s: str) -> bytes:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find("\0")
    if end >= 0:
        s = s[:end]
    return s.encode("utf-8")


def put_char(c: Char, fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte (taken modulo 256); a
    one-character string is written in UTF-8.
    """
    _write_all(fd, _char_bytes(c))


def put_str(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``, stopping at the first NUL."""
    _write_all(fd, _text_bytes(s))


def put_endl(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, _text_bytes(s) + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))