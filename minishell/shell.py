"""Interactive read-parse loop of the shell."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from minishell.commands import build_commands
from minishell.expand import replace_env
from minishell.tokens import Token, format_tokens, has_leading_error, tokenize

PROMPT = "<minishell> "
LEADING_ERROR = "Something is wrong near line start!\n"


def parse_line(
    line: str,
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> list[Token]:
    """Tokenize, expand and group one command line.

    The expanded tokens are listed on ``out``; when the line starts with
    a syntax error a message goes to ``err`` instead and no tokens are
    listed. Returns the tokens that were listed.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    tokens = tokenize(line)
    replace_env(tokens, environ)
    commands = []
    try:
        commands = build_commands(tokens)
    except ValueError as exc:
        if not has_leading_error(tokens):
            err.write(f"minishell: {exc}\n")
            tokens = []
    finally:
        for command in commands:
            command.close()
    if has_leading_error(tokens):
        err.write(LEADING_ERROR)
        tokens = []
    out.write(format_tokens(tokens))
    return tokens


def main(argv: list[str] | None = None) -> int:
    """Run the prompt loop until end of input; returns the exit status."""
    parser = argparse.ArgumentParser(prog="minishell")
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="print the PATH environment variable and exit",
    )
    args = parser.parse_args(argv)
    if args.show_path:
        path = os.environ.get("PATH")
        print(f"PATH environment variable == {path if path is not None else '(null)'}")
        return 0
    try:
        import readline  # noqa: F401  (line editing for input())
    except ImportError:
        pass
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return 1
        parse_line(line)


if __name__ == "__main__":
    sys.exit(main())