"""Grouping of tokens into pipeline commands with their redirections."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from minishell.tokens import Token, TokenType

NO_FILE = -1
_OPEN_FLAGS = os.O_RDONLY | os.O_CREAT
_OPEN_MODE = 0o644


def _open_redirect(path: str) -> int:
    """Open (creating if needed) a redirection target; -1 if it cannot be opened."""
    try:
        return os.open(path, _OPEN_FLAGS, _OPEN_MODE)
    except OSError:
        return NO_FILE


@dataclass
class Command:
    """One stage of a pipeline: its words and redirection descriptors."""

    full_cmd: list[str] = field(default_factory=list)
    input_file: int = NO_FILE
    output_file: int = NO_FILE

    def add_arg(self, arg: str) -> None:
        """Append a word to the command."""
        self.full_cmd.append(arg)

    def _redirect_input(self, path: str) -> None:
        self._replace("input_file", _open_redirect(path))

    def _redirect_output(self, path: str) -> None:
        self._replace("output_file", _open_redirect(path))

    def _replace(self, attr: str, fd: int) -> None:
        old = getattr(self, attr)
        if old >= 0:
            os.close(old)
        setattr(self, attr, fd)

    def close(self) -> None:
        """Close any open redirection descriptors."""
        for attr in ("input_file", "output_file"):
            fd = getattr(self, attr)
            if fd >= 0:
                try:
                    os.close(fd)
                except OSError:
                    pass
            setattr(self, attr, NO_FILE)

    def __enter__(self) -> Command:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def build_commands(tokens: Iterable[Token]) -> list[Command]:
    """Build the list of pipeline commands from a token stream.

    Words become arguments; ``<`` opens its target as input and ``>`` or
    ``>>`` open theirs as output, each target being created when missing
    and a later redirection replacing an earlier one. A pipe ends the
    current command. A here-doc operator is skipped, so its delimiter is
    taken as an ordinary word.

    Raises ValueError when a redirection has no target.
    """
    commands: list[Command] = []
    current: Command | None = None
    stream: Iterator[Token] = iter(tokens)
    try:
        for token in stream:
            if current is None:
                current = Command()
            if token.type == TokenType.WORD:
                current.add_arg(token.content)
            elif token.type in (
                TokenType.REDIR_IN,
                TokenType.REDIR_OUT,
                TokenType.DREDIR_OUT,
            ):
                target = next(stream, None)
                if target is None:
                    raise ValueError(
                        f"missing file name after '{token.content}'"
                    )
                if token.type == TokenType.REDIR_IN:
                    current._redirect_input(target.content)
                else:
                    current._redirect_output(target.content)
            elif token.type == TokenType.PIPE:
                commands.append(current)
                current = None
        if current is not None:
            commands.append(current)
    except ValueError:
        for command in commands:
            command.close()
        if current is not None:
            current.close()
        raise
    return commands


def format_commands(commands: Iterable[Command]) -> str:
    """Render commands as the diagnostic listing printed by the shell."""
    lines: list[str] = []
    for command in commands:
        lines.append("Command:\n")
        lines.extend(
            f"Arg[{index}]: {arg}\n" for index, arg in enumerate(command.full_cmd)
        )
        lines.append(f"Input file: {command.input_file}\n")
        lines.append(f"Output file: {command.output_file}\n")
    return "".join(lines)