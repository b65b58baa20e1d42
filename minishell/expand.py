"""Expansion of ``$NAME`` references in words."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from minishell.tokens import Token


def _expand_first(text: str, quoted: bool, env: Mapping[str, str]) -> str:
    for i, ch in enumerate(text):
        if ch == "'":
            quoted = True
        if ch == "$" and i + 1 < len(text):
            value = env.get(text[i + 1:])
            if value is None:
                return text[:i]
            if quoted:
                return text
            return text[:i] + value
    return text


def replace_env(tokens: Iterable[Token], environ: Mapping[str, str] | None = None) -> None:
    """Expand the first ``$`` reference of every token in place.

    Everything after the ``$`` is taken as the variable name. A set
    variable replaces the reference unless the token is single-quoted
    or an apostrophe precedes the ``$``; an unset variable is dropped
    together with the rest of the word.
    """
    env = os.environ if environ is None else environ
    for token in tokens:
        token.content = _expand_first(token.content, token.single_quoted, env)


def _name_length(text: str, start: int) -> int:
    end = start
    while end < len(text) and (
        (text[end].isascii() and text[end].isalnum()) or text[end] == "_"
    ):
        end += 1
    return end - start


def expand_variables(text: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace every ``$NAME`` in ``text`` with its value.

    A name is a run of ASCII letters, digits and underscores; unset
    names expand to nothing. A ``$`` at the very end is kept.
    """
    env = os.environ if environ is None else environ
    parts: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "$" and i + 1 < len(text):
            i += 1
            length = _name_length(text, i)
            name = text[i:i + length]
            value = env.get(name) if name else None
            if value is not None:
                parts.append(value)
            i += length
        else:
            parts.append(text[i])
            i += 1
    return "".join(parts)