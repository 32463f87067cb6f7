"""Maximal-munch scanner over an in-memory source string."""

from __future__ import annotations

from vhdlex.rules import DEFAULT_RULES, Rule, RuleTable
from vhdlex.tokens import Token


def next_match(
    source: str,
    offset: int,
    rules: RuleTable,
    horizons: dict[str, int] | None = None,
) -> tuple[Rule, int] | None:
    """Select the rule that wins at *offset* and the length it matched.

    Longest match wins; ties go to the rule listed first. Returns None
    only when *offset* is at the end of *source*.

    *horizons* caches, per rule name, where the rule's closer last
    occurs in *source*. A rule whose closer does not occur at or after
    *offset* cannot match and is skipped. Pass the same dict for every
    call on one source so that each closer is searched for only once.
    """
    if offset >= len(source):
        return None
    if horizons is None:
        horizons = {}
    best: Rule | None = None
    best_len = 0
    for rule in rules:
        if rule.closer:
            horizon = horizons.get(rule.name)
            if horizon is None:
                horizon = horizons[rule.name] = source.rfind(rule.closer)
            if horizon < offset:
                continue
        length = rule.match_length(source, offset)
        # Strictly greater keeps the earlier rule on a tie
        if length > best_len:
            best, best_len = rule, length
    if best is None:
        # Unreachable with a RuleTable, which always ends in the fallback
        raise AssertionError(f"no rule matched at offset {offset}")
    return best, best_len


class Scanner:
    """Produce (token, lexeme) pairs from the cursor position onwards.

    The scanner keeps a reference to the caller's string and an offset
    into it; the remaining text is never copied.
    """

    __slots__ = ("_source", "_offset", "_rules", "_horizons")

    def __init__(self, source: str, rules: RuleTable = DEFAULT_RULES) -> None:
        self._source = source
        self._offset = 0
        self._rules = rules
        self._horizons: dict[str, int] = {}

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._source)

    @property
    def remaining(self) -> str:
        """The unconsumed text (a fresh copy, for inspection)."""
        return self._source[self._offset :]

    def scan(self) -> tuple[Token, str] | None:
        """Consume one lexeme and return it with its token, or None at end of input."""
        found = next_match(self._source, self._offset, self._rules, self._horizons)
        if found is None:
            return None
        rule, length = found
        start = self._offset
        self._offset = start + length
        lexeme = self._source[start : self._offset]
        return rule.classify(lexeme), lexeme
