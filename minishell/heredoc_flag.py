"""The flag file that records a here-document interrupted by Ctrl-C."""

from __future__ import annotations

import os

from minishell.diagnostics import perm_or_file_missing, read_fail
from minishell.models import ShellState

INTERRUPT_FLAG_FILE = "libft/fuck130"
INTERRUPTED_STATUS = 130


def consume_interrupt_flag(state: ShellState) -> bool:
    """Check the interrupt flag file under ``state.first_path`` and reset it.

    When the file holds ``1`` it is rewritten to ``0``, the status becomes
    130 and True is returned; otherwise False. Failures to open or read
    the file are reported on standard error and the OSError is raised.
    """
    path = os.path.join(state.first_path, INTERRUPT_FLAG_FILE)
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        perm_or_file_missing(path)
        raise
    try:
        first = os.read(fd, 1)
    except OSError:
        read_fail()
        raise
    finally:
        os.close(fd)
    if first != b"1":
        return False
    try:
        fd = os.open(path, os.O_WRONLY | os.O_TRUNC)
    except OSError:
        perm_or_file_missing(path)
        raise
    try:
        os.write(fd, b"0")
    finally:
        os.close(fd)
    state.status = INTERRUPTED_STATUS
    state.status_check = True
    return True