"""Conversions of integers to decimal and hexadecimal text."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def itoa(n: int) -> str:
    """Decimal representation of a signed integer."""
    return str(n)


def utoa(n: int) -> str:
    """Decimal representation of ``n`` taken as an unsigned 32-bit value."""
    return str(n & _UINT32_MASK)


def to_hex(n: int) -> str:
    """Lower-case hexadecimal of ``n`` taken as an unsigned 32-bit value."""
    return format(n & _UINT32_MASK, "x")


def to_hex_address(n: int) -> str:
    """Lower-case hexadecimal of ``n`` taken as an unsigned 64-bit value."""
    return format(n & _UINT64_MASK, "x")


def str_to_upper(text: str) -> str:
    """Upper-case ASCII small letters only, leaving every other character alone."""
    return "".join(
        chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text
    )