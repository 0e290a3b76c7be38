"""String comparison, searching and integer parsing over C-style strings.

A string is treated as ending at its first NUL character, if it has one.
Searches return an index into the string, or ``None`` when nothing matches.
"""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _cstr(s: str) -> str:
    """Cut ``s`` at its first NUL, the way a C string ends."""
    return s.split("\0", 1)[0]


def _target(c: str | int) -> str:
    """Turn a one-character string or a byte value into a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then a single optional sign, then as many
    digits as follow. Anything else ends the number; no digits gives 0. The
    result wraps around like a signed 32-bit integer.
    """
    text = _cstr(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _wrap_int32(-value if negative else value)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference between the code
    points of the first pair that differs (the end of a string counts as 0).
    """
    if n < 0:
        raise ValueError("n must not be negative")
    s1, s2 = _cstr(s1), _cstr(s2)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    target = _target(c)
    if target == "\0":
        return len(s)
    index = s.find(target)
    return None if index == -1 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    target = _target(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index == -1 else index


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    big, little = _cstr(big), _cstr(little)
    if not little:
        return 0
    index = big.find(little, 0, n)
    return None if index == -1 else index


def strstr(big: str, little: str) -> int | None:
    """Return 0 when ``big`` begins with ``little``, otherwise ``None``.

    Only a match at the very start of ``big`` is recognised; an empty
    ``little`` always matches.
    """
    big, little = _cstr(big), _cstr(little)
    return 0 if big.startswith(little) else None