"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from vhdlex.lexer import iter_pairs, tokenize
from vhdlex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def lex_pairs():
    """Return a helper that tokenizes source and returns (token, lexeme) pairs."""

    def _lex_pairs(source: str) -> list[tuple[Token, str]]:
        return list(iter_pairs(source))

    return _lex_pairs


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(pairs: list[tuple[Token, str]], expected: list[str]) -> None:
    """Assert that the lexemes of (token, lexeme) pairs match the expected list."""
    actual = [lexeme for _, lexeme in pairs]
    assert actual == expected, f"Expected {expected}, got {actual}"
