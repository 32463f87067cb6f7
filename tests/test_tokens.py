"""Test the token model and character classification helpers."""

import dataclasses

import pytest

from vhdlex.tokens import (
    TRIVIA,
    Token,
    TokenType,
    is_letter,
    is_letter_or_digit,
    is_whitespace,
)


class TestToken:
    def test_equality_by_type_and_value(self):
        assert Token(TokenType.IDENTIFIER, "clk") == Token(TokenType.IDENTIFIER, "clk")
        assert Token(TokenType.IDENTIFIER, "clk") != Token(TokenType.UNKNOWN, "clk")

    def test_immutable(self):
        tok = Token(TokenType.COMMENT, "-- x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tok.value = "-- y"  # type: ignore[misc]

    def test_hashable(self):
        assert len({Token(TokenType.UNKNOWN, ";"), Token(TokenType.UNKNOWN, ";")}) == 1

    def test_trivia_kinds(self):
        assert TRIVIA == {TokenType.WHITESPACE, TokenType.COMMENT}


class TestIsWhitespace:
    def test_accepted(self):
        for ch in " \t\r\n":
            assert is_whitespace(ch), f"Expected {ch!r} to be whitespace"

    def test_format_effectors_excluded(self):
        assert not is_whitespace("\v")
        assert not is_whitespace("\f")

    def test_nbsp_excluded(self):
        assert not is_whitespace("\u00a0")


class TestIsLetter:
    def test_ascii(self):
        assert is_letter("a")
        assert is_letter("Z")

    def test_latin1_letters(self):
        for ch in "ÀÖØöøÿßé":
            assert is_letter(ch), f"Expected {ch!r} to be a letter"

    def test_latin1_signs_excluded(self):
        assert not is_letter("×")
        assert not is_letter("÷")

    def test_non_letters(self):
        for ch in "0_\\'- ":
            assert not is_letter(ch), f"Expected {ch!r} to NOT be a letter"

    def test_outside_latin1(self):
        assert not is_letter("ā")
        assert not is_letter("λ")


class TestIsLetterOrDigit:
    def test_digits(self):
        for ch in "0123456789":
            assert is_letter_or_digit(ch)

    def test_underscore_excluded(self):
        assert not is_letter_or_digit("_")
