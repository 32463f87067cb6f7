"""Token dumps for the CLI and --verbose tracing."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import TextIO

from vhdlex.tokens import Token


def format_text(pairs: Iterable[tuple[Token, str]]) -> str:
    """One line per token: ``KIND<TAB>repr(value)``."""
    return "".join(f"{token.type.name}\t{token.value!r}\n" for token, _ in pairs)


def format_json(pairs: Iterable[tuple[Token, str]]) -> str:
    records = [
        {"type": token.type.name, "value": token.value, "lexeme": lexeme}
        for token, lexeme in pairs
    ]
    return json.dumps(records, ensure_ascii=False, indent=2) + "\n"


def dump_tokens(pairs: Iterable[tuple[Token, str]], *, file: TextIO = sys.stderr) -> None:
    """Print tokens with their character offsets to *file*."""
    offset = 0
    for token, lexeme in pairs:
        end = offset + len(lexeme)
        file.write(f"{offset:>6}..{end:<6} {token.type.name:<17} {token.value!r}\n")
        offset = end
