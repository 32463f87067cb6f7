"""VHDL lexer: converts source text into a lazy token stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from vhdlex.rules import DEFAULT_RULES, RuleTable
from vhdlex.scanner import Scanner
from vhdlex.tokens import TRIVIA, Token


class Lexer:
    """Single-pass iterator over the tokens of one source string.

    Each pull performs exactly one scanner step. Whitespace and comments
    are yielded like any other token; once exhausted the lexer stays
    exhausted.

        >>> [t.type.name for t in Lexer("a -- b")]
        ['IDENTIFIER', 'WHITESPACE', 'COMMENT']

    Instances share no state, so separate lexers may run on separate
    threads without coordination.
    """

    __slots__ = ("_scanner",)

    def __init__(self, source: str, rules: RuleTable = DEFAULT_RULES) -> None:
        self._scanner = Scanner(source, rules)

    @property
    def exhausted(self) -> bool:
        return self._scanner.at_end

    def next_pair(self) -> tuple[Token, str] | None:
        """Return the next (token, lexeme) pair, or None when exhausted."""
        return self._scanner.scan()

    def next_token(self) -> Token | None:
        """Return the next token, or None when exhausted."""
        pair = self._scanner.scan()
        if pair is None:
            return None
        return pair[0]

    def pairs(self) -> Iterator[tuple[Token, str]]:
        """Yield the remaining (token, lexeme) pairs from the shared cursor."""
        while True:
            pair = self._scanner.scan()
            if pair is None:
                return
            yield pair

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def tokenize(source: str, rules: RuleTable = DEFAULT_RULES) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return list(Lexer(source, rules))


def iter_pairs(source: str, rules: RuleTable = DEFAULT_RULES) -> Iterator[tuple[Token, str]]:
    """Lazily yield (token, lexeme) pairs for *source*."""
    return Lexer(source, rules).pairs()


def strip_trivia(tokens: Iterable[Token]) -> Iterator[Token]:
    """Drop whitespace and comment tokens, for consumers that ignore them."""
    return (t for t in tokens if t.type not in TRIVIA)
