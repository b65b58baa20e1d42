"""Character classes used by the command-line lexer."""

from __future__ import annotations

SYMBOLS = frozenset("|<>")


def is_whitespace(c: str) -> bool:
    """Return True for a space or one of the ASCII controls TAB through CR."""
    return c == " " or (len(c) == 1 and "\t" <= c <= "\r")


def is_symbol(c: str) -> bool:
    """Return True for the operator characters ``|``, ``<`` and ``>``."""
    return c in SYMBOLS and len(c) == 1


def find_dollar(text: str) -> str | None:
    """Return the text after the first ``$``, or None if there is no ``$``."""
    index = text.find("$")
    if index < 0:
        return None
    return text[index + 1:]