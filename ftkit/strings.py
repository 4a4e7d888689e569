"""String helpers that follow NUL-terminated string semantics.

Text arguments are ``str`` objects. Where a function works on a
fixed-size destination, such as ``strlcpy`` and ``strlcat``, the
destination is a ``bytearray`` and the source may be bytes or a ``str``,
which is encoded as UTF-8. Everything stops at the first NUL character,
the way the terminator would.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

Text = Union[str, bytes, bytearray]
Char = Union[str, int]

_INT_BITS = 32


def _content(s: Text) -> Text:
    """Return ``s`` up to, but not including, its first NUL."""
    nul = "\0" if isinstance(s, str) else b"\0"
    end = s.find(nul)
    return s if end < 0 else s[:end]


def _as_bytes(src: Text) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _as_char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(name: str, dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"{name}: size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"{name}: size {size} exceeds buffer of {len(dst)} bytes")


def strlen(s: Text) -> int:
    """Number of characters before the first NUL (or the whole length)."""
    return len(_content(s))


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a value of ``size`` or more means the
    copy was truncated.
    """
    _check_size("strlcpy", dst, size)
    data = _content(_as_bytes(src))
    if size:
        count = min(len(data), size - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``.

    At most ``size`` bytes of ``dst`` are used, including the NUL.
    Returns the length of the string it tried to create.
    """
    _check_size("strlcat", dst, size)
    data = _content(_as_bytes(src))
    start = min(strlen(dst), size)
    count = max(0, min(len(data), size - start - 1))
    dst[start:start + count] = data[:count]
    if start < size:
        dst[start + count] = 0
    return start + len(data)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _content(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _content(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first pair that differs,
    treating the end of the shorter string as NUL, or 0 when equal.
    """
    a, b = _content(s1), _content(s2)
    for i in range(min(n, max(len(a), len(b)))):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` inside the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0; a missing one gives None.
    """
    target = _content(needle)
    if not target:
        return 0
    index = _content(haystack)[:max(length, 0)].find(target)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C routine does.

    Leading whitespace (tab through carriage return, and space) is
    skipped, then one optional sign. A ``+`` directly followed by ``-``
    stops the parse. The result wraps around like a 32-bit signed int.
    """
    text = _content(s)
    i = 0
    while i < len(text) and (text[i] == " " or "\t" <= text[i] <= "\r"):
        i += 1
    if text[i:i + 1] == "+" and text[i + 1:i + 2] != "-":
        i += 1
    sign = 1
    if text[i:i + 1] == "-":
        sign = -1
        i += 1
    value = 0
    while i < len(text) and "0" <= text[i] <= "9":
        value = value * 10 + (ord(text[i]) - ord("0"))
        i += 1
    result = (value * sign) % (1 << _INT_BITS)
    if result >= 1 << (_INT_BITS - 1):
        result -= 1 << _INT_BITS
    return result


def strdup(s: str) -> str:
    """A copy of ``s`` up to its first NUL."""
    return str(_content(s))


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    text = _content(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return _content(s1) + _content(s2)


def strtrim(s: str, chars: str) -> str:
    """``s`` with every character of ``chars`` removed from both ends.

    An empty ``chars`` removes nothing.
    """
    text = _content(s)
    strip_set = _content(chars)
    if not strip_set:
        return text
    return text.strip(strip_set)


def split(s: str, sep: Char) -> List[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    ch = _as_char(sep)
    return [piece for piece in _content(s).split(ch) if piece]


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa: expected an int, got {type(n).__name__}")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(_content(s)))


def striteri(buf: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for each item of ``buf`` up to a NUL.

    When ``f`` returns something other than None, that value replaces
    the item in place.
    """
    for i, item in enumerate(buf):
        if item == "\0" or item == 0:
            break
        replacement = f(i, item)
        if replacement is not None:
            buf[i] = replacement