"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd``; return the count written."""
    if fd < 0:
        return 0
    view = memoryview(data)
    total = 0
    while total < len(data):
        total += os.write(fd, view[total:])
    return total


def put_char_fd(c: str | int, fd: int) -> int:
    """Write one character (a one-character string or a byte value) to ``fd``.

    Nothing is written to a negative descriptor. Returns the bytes written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    else:
        data = bytes([c & 0xFF])
    return _write_all(fd, data)


def put_str_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd``; nothing is written to a negative descriptor."""
    return _write_all(fd, s.encode())


def put_endl_fd(s: str, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return _write_all(fd, s.encode() + b"\n")


def put_nbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    return _write_all(fd, str(n).encode())