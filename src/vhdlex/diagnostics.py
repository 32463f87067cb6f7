"""Source diagnostics derived from the token stream.

The tokenizer reports anything it cannot classify as UNKNOWN and moves
on. This module looks at those UNKNOWN tokens afterwards and picks out
the ones that can never be valid VHDL: unterminated block comments and
extended identifiers, stray underscores, and control characters.
Delimiters and digits also come out as UNKNOWN but are left for the
parser.
"""

from __future__ import annotations

from vhdlex.errors import LexError
from vhdlex.lexer import iter_pairs
from vhdlex.log import get_logger
from vhdlex.rules import DEFAULT_RULES, RuleTable
from vhdlex.tokens import LINE_TERMINATORS, WHITESPACE_CHARS, Position, TokenType

logger = get_logger(__name__)

# Format effectors are legal in VHDL source
_FORMAT_EFFECTORS = WHITESPACE_CHARS | LINE_TERMINATORS


class _Tracker:
    """Line/column bookkeeping; CR, LF, and CRLF each end one line."""

    __slots__ = ("line", "column", "offset", "_after_cr")

    def __init__(self) -> None:
        self.line = 1
        self.column = 1
        self.offset = 0
        self._after_cr = False

    def position(self) -> Position:
        return Position(self.line, self.column, self.offset)

    def advance(self, text: str) -> None:
        for ch in text:
            if ch == "\r":
                self.line += 1
                self.column = 1
                self._after_cr = True
            elif ch == "\n":
                if not self._after_cr:
                    self.line += 1
                    self.column = 1
                self._after_cr = False
            else:
                self.column += 1
                self._after_cr = False
            self.offset += 1


def locate(source: str, offset: int) -> Position:
    """Return the Position of character *offset* in *source*."""
    tracker = _Tracker()
    tracker.advance(source[:offset])
    return tracker.position()


def _describe(ch: str) -> str | None:
    if ch == "\\":
        return "unterminated extended identifier"
    if ch == "_":
        return "stray underscore in identifier"
    code = ord(ch)
    if (code < 0x20 and ch not in _FORMAT_EFFECTORS) or 0x7F <= code <= 0x9F:
        return f"invalid character U+{code:04X}"
    return None


def check(source: str, rules: RuleTable = DEFAULT_RULES) -> list[LexError]:
    """Return a LexError for every UNKNOWN token that cannot be valid VHDL."""
    errors: list[LexError] = []
    tracker = _Tracker()
    slash: Position | None = None

    for token, lexeme in iter_pairs(source, rules):
        pos = tracker.position()
        tracker.advance(lexeme)
        unknown = token.type is TokenType.UNKNOWN

        if slash is not None:
            opened, slash = slash, None
            if unknown and lexeme == "*":
                # The block comment rule only fails when no */ follows
                errors.append(LexError("unterminated block comment", opened, source, length=2))
                continue

        if not unknown:
            continue
        if lexeme == "/":
            slash = pos
            continue
        message = _describe(lexeme)
        if message is not None:
            errors.append(LexError(message, pos, source))

    logger.debug("check found %d problem(s)", len(errors))
    return errors
