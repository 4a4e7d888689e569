"""Character classification and case conversion for the ASCII range.

Every function takes either a one-character string or an integer
character code. The case functions hand back a value of the same kind
they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) < 128


def isprint(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: Char) -> Char:
    """Map a lowercase ASCII letter to uppercase; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def tolower(c: Char) -> Char:
    """Map an uppercase ASCII letter to lowercase; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)