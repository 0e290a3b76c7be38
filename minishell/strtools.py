"""Building new strings from existing ones: slicing, trimming, splitting, joining."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """``s`` with every character of ``charset`` removed from both ends."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Words of ``s`` separated by runs of the single character ``sep``.

    Empty words, from leading, trailing or repeated separators, are dropped.
    """
    sep = _single_char(sep)
    return [word for word in s.split(sep) if word]


def strjoin(s1: str | None, s2: str) -> str:
    """``s1`` followed by ``s2``; a missing ``s1`` counts as empty."""
    return (s1 or "") + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters, nothing
    when ``size`` is 0) and the full length of ``src``, so truncation shows
    as a length not smaller than ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dest`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = len(dest)
    if dest_len >= size:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], str | None]
) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in place.

    When ``f`` returns a character it replaces the one at that index;
    returning ``None`` leaves it as it was.
    """
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement