"""Small string helpers with C-library style semantics."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading, optionally signed, decimal integer.

    Leading whitespace is skipped, one sign character is accepted and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the remainder of ``haystack`` from the match, the whole
    ``haystack`` for an empty needle, or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    if index < 0:
        return None
    return haystack[index:]


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when equal, otherwise the difference of the code points
    at the first mismatch, a missing character counting as zero.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return ord(x) - ord(y)
    stop = min(len(a), len(b), n)
    if stop == n:
        return 0
    left = ord(a[stop]) if stop < len(a) else 0
    right = ord(b[stop]) if stop < len(b) else 0
    return left - right