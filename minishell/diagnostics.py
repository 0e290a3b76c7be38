"""Error messages the shell writes, and the check for unknown commands."""

from __future__ import annotations

import os
from typing import Optional

from minishell.models import Command, ShellState
from minishell.output import put_str_fd
from minishell.printf import print_formatted

_STDERR = 2
_NOT_A_COMMAND = "fake_fdp"


def read_fail() -> None:
    """Report a failed read."""
    put_str_fd("Invalid read\n", _STDERR)


def ctrld_actioned(limiter: str) -> None:
    """Warn on standard output that a here-document ended at end of file."""
    print_formatted("Warning: here-document delimited")
    print_formatted("by end-of-file (wanted `%s')\n", limiter)


def export_fail(name: str) -> None:
    """Report an identifier that export cannot accept."""
    put_str_fd(f"export: '{name}': not a valid identifier\n", _STDERR)


def malloc_fail() -> None:
    """Report a failed allocation."""
    put_str_fd("Malloc error\n", _STDERR)


def creation_fail() -> None:
    """Report a file that could not be created."""
    put_str_fd("Cannot create file\n", _STDERR)


def pipe_fail() -> None:
    """Report a pipe that could not be made."""
    put_str_fd("Pipe failure\n", _STDERR)


def fork_fail() -> None:
    """Report a process that could not be started."""
    put_str_fd("Fork failure\n", _STDERR)


def waitpid_fail() -> None:
    """Report a failed wait for a child process."""
    put_str_fd("Waitpid fail\n", _STDERR)


def dup2_fail() -> None:
    """Report a descriptor that could not be duplicated."""
    put_str_fd("Dup2_failure\n", _STDERR)


def permission_fail(path: Optional[str]) -> None:
    """Report that ``path`` may not be accessed."""
    put_str_fd(f"{path or ''}: Permission denied\n", _STDERR)


def _read_permission_denied(path: str) -> bool:
    try:
        os.stat(path)
    except PermissionError:
        return True
    except OSError:
        return False
    return not os.access(path, os.R_OK)


def perm_or_file_missing(path: str) -> None:
    """Report ``path`` as unreadable or as missing, whichever applies."""
    if _read_permission_denied(path):
        put_str_fd(f"{path}: Permission denied\n", _STDERR)
    else:
        put_str_fd(f"{path}: No such file or directory\n", _STDERR)


def infiles_unreadable(command: Command) -> bool:
    """True when any input file of ``command`` cannot be opened for reading."""
    for path in command.infile_tab or ():
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            return True
        os.close(fd)
    return False


def report_missing_commands(state: ShellState) -> list[str]:
    """Report every command that names no program that could be found.

    Commands whose input files cannot be opened are passed over, since
    that failure has already been reported. Each report sets the status
    to 127. Returns the names reported, in order.
    """
    reported: list[str] = []
    for command in state.commands:
        if infiles_unreadable(command):
            continue
        if command.cmd is None and command.cmd_str and command.cmd_str != _NOT_A_COMMAND:
            put_str_fd(f"minishell: {command.cmd_str}: command not found\n", _STDERR)
            state.status = 127
            state.status_check = True
            reported.append(command.cmd_str)
    return reported