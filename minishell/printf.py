"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from minishell.numfmt import itoa, str_to_upper, to_hex, to_hex_address, utoa
from minishell.output import put_str_fd

_CONVERSIONS = frozenset("cspdiuxX")


def _wrap_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _render(conv: str, arg: Any) -> str:
    if conv == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c expects a single character, got {arg!r}")
            return arg
        return chr(int(arg) & 0xFF)
    if conv == "s":
        return "(null)" if arg is None else str(arg)
    if conv in ("d", "i"):
        return itoa(_wrap_int32(int(arg)))
    if conv == "u":
        return utoa(int(arg))
    if conv == "x":
        return to_hex(int(arg))
    if conv == "X":
        return str_to_upper(to_hex(int(arg)))
    # conv == "p"
    if arg is None or arg == 0:
        return "(nil)"
    return "0x" + to_hex_address(int(arg))


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    A ``%`` followed by anything other than a known conversion is kept as
    a literal ``%``. Raises TypeError when there are too few arguments.
    """
    values: Iterator[Any] = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        following = fmt[pos + 1] if pos + 1 < len(fmt) else ""
        if ch != "%" or (following not in _CONVERSIONS and following != "%"):
            parts.append(ch)
            pos += 1
            continue
        if following == "%":
            parts.append("%")
        else:
            try:
                arg = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            parts.append(_render(following, arg))
        pos += 2
    return "".join(parts)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return bytes written."""
    if not fmt:
        return 0
    return put_str_fd(format_printf(fmt, *args), 1)