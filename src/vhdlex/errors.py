"""Error types with formatted source context."""

from __future__ import annotations

import re

from vhdlex.tokens import Position

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def source_line(source: str, line: int) -> str:
    """Text of 1-based *line* without its line break, or "" past the end.

    Lines are split on CRLF, CR, and LF, as diagnostics count them.
    """
    lines = _LINE_BREAK.split(source)
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return ""


class RuleTableError(ValueError):
    """Raised when a rule table is constructed incorrectly."""


class ConfigError(Exception):
    """Raised for an invalid configuration value."""


class LexError(Exception):
    """A lexical problem at a source position, with source context.

    The tokenizer itself never raises this; diagnostics return instances
    as values so that callers decide whether to raise, print, or publish.
    """

    def __init__(self, message: str, position: Position, source: str, length: int = 1) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.length = length
        super().__init__(self.format())

    def format(self, filename: str = "input.vhd") -> str:
        text = source_line(self.source, self.position.line)
        col = self.position.column

        # Underline the offending characters, at least one, within the line
        underline_len = max(1, min(self.length, len(text) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {text}\n"
            f"{blank_gutter} {pad}{carets}"
        )
