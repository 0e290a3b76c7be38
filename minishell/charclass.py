"""ASCII character classification and numeric-string checks."""

from __future__ import annotations

_INT64_MAX_PLUS_ONE = "9223372036854775808"
_INT64_MIN_MINUS_ONE = "-9223372036854775809"


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def is_big_number(text: str) -> bool:
    """True when ``text`` is too long or too large to fit a signed 64-bit integer.

    The check is textual: strings of 19 characters are compared with
    2**63, strings of 20 characters with -(2**63) - 1, and anything longer
    (or 20 characters without a leading minus) counts as too big.
    """
    length = len(text)
    if length == 19 and text >= _INT64_MAX_PLUS_ONE:
        return True
    if length == 20 and text >= _INT64_MIN_MINUS_ONE:
        return True
    if length > 19 and not text.startswith("-"):
        return True
    return length > 20


def is_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed only by digits and fits 64 bits."""
    if is_big_number(text):
        return False
    body = text[1:] if text[:1] in ("-", "+") else text
    return all(is_digit(ch) for ch in body)