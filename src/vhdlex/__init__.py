"""VHDL-2008 tokenizer."""

from __future__ import annotations

from vhdlex.lexer import Lexer, tokenize
from vhdlex.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = ["Lexer", "Token", "TokenType", "tokenize", "__version__"]
