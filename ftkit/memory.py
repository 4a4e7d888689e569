"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(name: str, n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{name}: length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_length("memset", length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length("memcpy", n, dst, src)
    if dst is not src:
        dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if n == 0:
        return buf
    if dst < 0 or src < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_length("memmove", n, buf[src:], buf[dst:])
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` in ``buf[:n]``, or None."""
    _check_length("memchr", n, buf)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length("memcmp", n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)