"""Byte-buffer helpers: zeroing, filling, copying, searching and comparing.

Mutating helpers work in place on a ``bytearray`` (or writable
``memoryview``) and return that same buffer.  A count that runs past the
end of a buffer, or is negative, raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(name: str, length: int, count: int) -> None:
    if count < 0:
        raise ValueError(f"{name}: negative count {count}")
    if count > length:
        raise ValueError(f"{name}: count {count} exceeds buffer length {length}")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check_span("bzero", len(buf), n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, c: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` in the first
    *size* bytes of *data*, or None if there is none."""
    _check_span("memchr", len(data), size)
    index = bytes(data[:size]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, size: int) -> int:
    """Compare the first *size* bytes of two buffers.

    Returns the difference of the first pair of differing bytes, taken as
    unsigned values, or 0 if the spans are equal.
    """
    if s1 is s2:
        return 0
    _check_span("memcmp", min(len(s1), len(s2)), size)
    for a, b in zip(bytes(s1[:size]), bytes(s2[:size])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: Buffer, src: Optional[ReadableBuffer], n: int) -> Buffer:
    """Copy *n* bytes from *src* to the start of *dst*; return *dst*.

    A missing *src* leaves *dst* untouched.
    """
    if src is None:
        return dst
    _check_span("memcpy", min(len(dst), len(src)), n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: Buffer, dst: int, src: int, length: int) -> Buffer:
    """Move *length* bytes inside *buf* from offset *src* to offset *dst*.

    Overlapping regions are handled correctly.  Returns *buf*.
    """
    if dst < 0 or src < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_span("memmove", len(buf) - max(dst, src), length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memset(buf: Buffer, c: int, length: int) -> Buffer:
    """Fill the first *length* bytes of *buf* with ``c & 0xFF``; return *buf*."""
    _check_span("memset", len(buf), length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf