"""Lexical analysis of a command line into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from minishell.chars import is_symbol, is_whitespace


class TokenType(IntEnum):
    """Kinds of token; operator kinds carry the code of their character."""

    SPACE = ord(" ")
    NEW_LINE = ord("\n")
    QUOTE = ord("'")
    DQUOTE = ord('"')
    DOLLAR = ord("$")
    PIPE = ord("|")
    REDIR_IN = ord("<")
    REDIR_OUT = ord(">")
    DREDIR_OUT = ord(">") + 1
    HERE_DOC = ord(">") + 2
    WORD = -1


REDIRECTIONS = frozenset(
    {
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.HERE_DOC,
        TokenType.DREDIR_OUT,
    }
)

_DOUBLE_OPERATORS = {
    ">>": TokenType.DREDIR_OUT,
    "<<": TokenType.HERE_DOC,
}

_SINGLE_OPERATORS = {
    "|": TokenType.PIPE,
    ">": TokenType.REDIR_OUT,
    "<": TokenType.REDIR_IN,
}


@dataclass
class Token:
    """One lexical unit of a command line."""

    content: str
    type: TokenType
    single_quoted: bool = False


def tokenize(line: str) -> list[Token]:
    """Split a command line into words and operator tokens.

    A quoted section that starts a token becomes one word without its
    quotes; an unterminated quote runs to the end of the line. The
    single-quote flag is raised when a single-quoted section is closed
    and is carried over to following quoted words until an operator or
    plain word resets it.
    """
    tokens: list[Token] = []
    single_quoted = False
    length = len(line)
    i = 0
    while i < length:
        ch = line[i]
        if is_whitespace(ch):
            i += 1
        elif is_symbol(ch):
            pair = line[i:i + 2]
            single_quoted = False
            if pair in _DOUBLE_OPERATORS:
                tokens.append(Token(pair, _DOUBLE_OPERATORS[pair], single_quoted))
                i += 2
            else:
                tokens.append(Token(ch, _SINGLE_OPERATORS[ch], single_quoted))
                i += 1
        elif ch in "\"'":
            end = line.find(ch, i + 1)
            closed = end >= 0
            if not closed:
                end = length
            if closed and ch == "'":
                single_quoted = True
            tokens.append(Token(line[i + 1:end], TokenType.WORD, single_quoted))
            i = end + 1 if closed else length
        else:
            start = i
            while i < length and not is_symbol(line[i]) and not is_whitespace(line[i]):
                i += 1
            single_quoted = False
            tokens.append(Token(line[start:i], TokenType.WORD, single_quoted))
    return tokens


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens as the diagnostic listing printed by the shell."""
    return "".join(
        f"Data --> [{token.content}]\n"
        f"type number --> {int(token.type)}\n"
        f"flag --> {int(token.single_quoted)}\n"
        for token in tokens
    )


def has_leading_error(tokens: list[Token]) -> bool:
    """Return True if the line starts with a syntax error.

    That is a leading pipe, or a leading redirection not followed by a word.
    """
    if not tokens:
        return False
    first = tokens[0]
    if first.type == TokenType.PIPE:
        return True
    if first.type in REDIRECTIONS:
        return len(tokens) < 2 or tokens[1].type != TokenType.WORD
    return False