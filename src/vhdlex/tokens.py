"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Trivia
    WHITESPACE = auto()  # run of space/tab/CR/LF
    COMMENT = auto()  # -- line comment or /* block comment */

    # Content
    CHARACTER_LITERAL = auto()  # 'c', value is the middle character
    IDENTIFIER = auto()  # basic or \extended\, value is the decoded name

    # Fallback
    UNKNOWN = auto()  # single character no other rule matched


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified token.

    ``value`` holds the decoded payload for character literals and
    identifiers, and the lexeme text for every other kind.
    """

    type: TokenType
    value: str


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


TRIVIA = frozenset({TokenType.WHITESPACE, TokenType.COMMENT})

# Characters merged into a WHITESPACE token
WHITESPACE_CHARS = frozenset(" \t\r\n")

# Format effectors that terminate a line comment
LINE_TERMINATORS = frozenset("\n\r\v\f")

# ASCII letters plus the ISO-8859-1 letters U+00C0..U+00FF without × and ÷
LETTERS = (
    frozenset(string.ascii_letters) | frozenset(chr(c) for c in range(0xC0, 0x100))
) - {"×", "÷"}

DIGITS = frozenset(string.digits)


def is_whitespace(ch: str) -> bool:
    """Return True if ch is merged into a WHITESPACE token."""
    return ch in WHITESPACE_CHARS


def is_letter(ch: str) -> bool:
    """Return True if ch is a VHDL letter."""
    return ch in LETTERS


def is_letter_or_digit(ch: str) -> bool:
    """Return True if ch is a VHDL letter or a decimal digit."""
    return ch in LETTERS or ch in DIGITS
