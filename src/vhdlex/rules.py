"""Lexical rules for VHDL and the ordered table the scanner applies.

Each rule pairs a compiled pattern with a classifier that turns the
matched lexeme into a Token. Table order is priority: when two rules
match the same number of characters, the earlier one wins. The
single-character fallback is always appended last, so every position
in any input has at least one match.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from vhdlex.errors import RuleTableError
from vhdlex.log import get_logger
from vhdlex.tokens import (
    DIGITS,
    LETTERS,
    LINE_TERMINATORS,
    WHITESPACE_CHARS,
    Token,
    TokenType,
)

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Rule:
    """A named pattern and the classifier for its lexemes.

    *closer* names the text a match must end with, when there is one.
    The scanner uses it to skip the rule once no closer is left in the
    source.
    """

    name: str
    pattern: re.Pattern[str]
    classify: Callable[[str], Token]
    closer: str = ""

    def match_length(self, source: str, offset: int) -> int:
        """Length of this rule's match at *offset*, or 0 if it does not match."""
        m = self.pattern.match(source, offset)
        if m is None:
            return 0
        return m.end() - offset


# ----------------------------------------------------------------------
# Classifiers
# ----------------------------------------------------------------------


def _whitespace(lexeme: str) -> Token:
    return Token(TokenType.WHITESPACE, lexeme)


def _comment(lexeme: str) -> Token:
    return Token(TokenType.COMMENT, lexeme)


def _character_literal(lexeme: str) -> Token:
    return Token(TokenType.CHARACTER_LITERAL, lexeme[1])


def _basic_identifier(lexeme: str) -> Token:
    return Token(TokenType.IDENTIFIER, lexeme)


def _extended_identifier(lexeme: str) -> Token:
    """Collapse doubled backslashes; the delimiters stay part of the name."""
    interior = lexeme[1:-1].replace("\\\\", "\\")
    return Token(TokenType.IDENTIFIER, f"\\{interior}\\")


def _unknown(lexeme: str) -> Token:
    return Token(TokenType.UNKNOWN, lexeme)


# ----------------------------------------------------------------------
# Patterns
# ----------------------------------------------------------------------


def char_class(chars: Iterable[str], negate: bool = False) -> str:
    """Regex character class matching exactly *chars* (or everything else)."""
    body = re.escape("".join(sorted(chars)))
    return f"[^{body}]" if negate else f"[{body}]"


_LETTER = char_class(LETTERS)
_LETTER_OR_DIGIT = char_class(LETTERS | DIGITS)

WHITESPACE = Rule(
    "whitespace", re.compile(char_class(WHITESPACE_CHARS) + "+"), _whitespace
)

# Runs to the end of the line; the line terminator is not included
LINE_COMMENT = Rule(
    "line_comment",
    re.compile("--" + char_class(LINE_TERMINATORS, negate=True) + "*"),
    _comment,
)

# Closed by the first */, no nesting; no match at all when unterminated
BLOCK_COMMENT = Rule(
    "block_comment", re.compile(r"/\*.*?\*/", re.DOTALL), _comment, closer="*/"
)

CHARACTER_LITERAL = Rule(
    "character_literal", re.compile(r"'.'", re.DOTALL), _character_literal
)

# No leading, trailing, or doubled underscores
BASIC_IDENTIFIER = Rule(
    "basic_identifier",
    re.compile(f"{_LETTER}(?:_?{_LETTER_OR_DIGIT})*"),
    _basic_identifier,
)

# A literal backslash inside the name is written twice
EXTENDED_IDENTIFIER = Rule(
    "extended_identifier",
    re.compile(r"\\(?:[^\\]|\\\\)*\\"),
    _extended_identifier,
)

FALLBACK = Rule("unknown", re.compile(r".", re.DOTALL), _unknown)


class RuleTable:
    """Ordered, immutable sequence of rules that always ends in FALLBACK.

    FALLBACK is appended on construction. Listing it explicitly, or
    reusing a rule name, raises RuleTableError.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        ordered = list(rules)
        seen: set[str] = set()
        for rule in ordered:
            if rule is FALLBACK or rule.name == FALLBACK.name:
                raise RuleTableError(
                    "the fallback rule is appended automatically and must not be listed"
                )
            if rule.name in seen:
                raise RuleTableError(f"duplicate rule name {rule.name!r}")
            seen.add(rule.name)
        ordered.append(FALLBACK)
        self._rules: tuple[Rule, ...] = tuple(ordered)
        logger.debug("rule table: %s", ", ".join(self.names))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleTable({list(self.names)!r})"


DEFAULT_RULES = RuleTable(
    [
        WHITESPACE,
        LINE_COMMENT,
        BLOCK_COMMENT,
        CHARACTER_LITERAL,
        BASIC_IDENTIFIER,
        EXTENDED_IDENTIFIER,
    ]
)
