"""Byte-buffer filling, copying, searching and comparison."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_ALLOC_LIMIT = 2147483647


def _check_length(buf: ReadableBuffer, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buf):
        raise ValueError(f"n ({n}) exceeds buffer length ({len(buf)})")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(dest, n)
    _check_length(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_length(dest, n)
    _check_length(src, n)
    if n:
        # Taking a snapshot first makes overlapping views safe.
        dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: ReadableBuffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    _check_length(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; 0 when equal, else the first byte difference."""
    _check_length(s1, n)
    _check_length(s2, n)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the total exceeds 2147483647 bytes.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    total = nmemb * size
    if total > _ALLOC_LIMIT:
        raise MemoryError(f"allocation of {total} bytes refused")
    return bytearray(total)