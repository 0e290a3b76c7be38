"""Copies of environment tables, optionally extended with the user id."""

from __future__ import annotations

from collections.abc import Sequence

_RUNTIME_DIR = "XDG_RUNTIME_DIR"


def get_uid(env: Sequence[str]) -> str:
    """A ``UID=<digits>`` entry taken from the XDG_RUNTIME_DIR variable.

    The digits are the first run of decimal digits in that entry.
    Raises KeyError when no such variable exists and ValueError when it
    holds no digits.
    """
    entry = next((item for item in env if item.startswith(_RUNTIME_DIR)), None)
    if entry is None:
        raise KeyError(_RUNTIME_DIR)
    start = next((i for i, ch in enumerate(entry) if "0" <= ch <= "9"), None)
    if start is None:
        raise ValueError(f"no user id in {entry!r}")
    end = start
    while end < len(entry) and "0" <= entry[end] <= "9":
        end += 1
    return "UID=" + entry[start:end]


def copy_env(env: Sequence[str]) -> list[str]:
    """An independent copy of the environment table."""
    return list(env)


def copy_env_with_uid(env: Sequence[str]) -> list[str]:
    """A copy of the environment table with a ``UID=`` entry appended."""
    return [*env, get_uid(env)]