"""Data carried through one shell session: tokens, commands and shared state."""

from __future__ import annotations

import contextlib
import enum
import os
from dataclasses import dataclass, field
from typing import Optional


class TokenType(enum.IntEnum):
    """Kinds of token produced when a command line is split up."""

    INPUT = 1
    HERE_DOC = 2
    CMD = 3
    ARG = 4
    PIPE = 5
    OUTPUT_APPEND = 6
    OUTPUT_TRUNC = 7


@dataclass
class Token:
    """One piece of a command line and what it was recognised as."""

    text: str
    type: Optional[TokenType] = None
    cmd: Optional[str] = None


@dataclass
class Command:
    """One command of a pipeline, with its arguments and redirections.

    ``cmd`` is the resolved program path, ``cmd_str`` the name as typed.
    ``infile_is_temporary`` marks an input file created for a here-document,
    which is deleted when the state is released.
    """

    cmd: Optional[str] = None
    cmd_str: Optional[str] = None
    full_cmd: list[str] = field(default_factory=list)
    count_here_doc: int = 0
    infile_here_doc: bool = False
    limiters: list[str] = field(default_factory=list)
    path_check: bool = False
    infile_tab: list[str] = field(default_factory=list)
    infile: Optional[str] = None
    infile_is_temporary: bool = False
    fail_infile: bool = False
    fail_outfile: bool = False
    outfile: Optional[str] = None
    outfile_tab: list[str] = field(default_factory=list)
    outfile_append: bool = False
    outfile_append_tab: list[bool] = field(default_factory=list)
    echo_arg: Optional[str] = None
    next_arg: Optional[str] = None
    next_arg_type: Optional[TokenType] = None


@dataclass
class ShellState:
    """Everything the shell keeps between and during command lines."""

    commands: list[Command] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    cmd_size: int = 0
    exec_count: int = 0
    pids: list[int] = field(default_factory=list)
    pipe_fds: list[int] = field(default_factory=list)
    env: list[str] = field(default_factory=list)
    here_doc_check: bool = False
    path_env: list[str] = field(default_factory=list)
    variables_parsing: list[str] = field(default_factory=list)
    char_count: int = 0
    env_check: bool = False
    saved_stdin: int = -1
    saved_stdout: int = -1
    status: int = 0
    status_check: bool = False
    first_path: str = ""

    def _release_line(self) -> None:
        self.tokens.clear()
        for command in self.commands:
            if command.infile_is_temporary and command.infile:
                with contextlib.suppress(OSError):
                    os.unlink(command.infile)
        self.commands.clear()
        self.pids.clear()
        self.pipe_fds.clear()
        self.path_env.clear()

    def release(self, full: bool) -> None:
        """Drop what one command line built up.

        Temporary here-document files are deleted. With ``full`` the
        environment and start directory are dropped as well and the
        session ends by raising ``SystemExit(0)``.
        """
        self._release_line()
        self.char_count = 0
        if full:
            self.env.clear()
            self.first_path = ""
            raise SystemExit(0)
        self.exec_count = 0