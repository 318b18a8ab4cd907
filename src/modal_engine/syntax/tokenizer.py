"""Ordered-rule lexical classifier used for highlighting."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, NamedTuple

from .rules import DEFAULT_RULE_SET, RuleSet


class TokenKind(str, Enum):
    COMMENT = "comment"
    LITERAL = "literal"
    KEYWORD = "keyword"
    FUNCTION = "function"
    TYPE = "type"
    IDENTIFIER = "identifier"
    EXTRA = "extra"
    DELIMITER = "delimiter"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"


class Token(NamedTuple):
    text: str
    kind: TokenKind


_RULE_KINDS = {
    "comment": TokenKind.COMMENT,
    "literal": TokenKind.LITERAL,
    "keyword": TokenKind.KEYWORD,
    "function": TokenKind.FUNCTION,
    "type": TokenKind.TYPE,
    "identifier": TokenKind.IDENTIFIER,
    "extra": TokenKind.EXTRA,
    "delimiter": TokenKind.DELIMITER,
}


def _whitespace_run(text: str) -> int:
    for index, char in enumerate(text):
        if not char.isspace():
            return index
    return len(text)


class Tokenizer:
    """Splits a line into non-overlapping tokens that concatenate back to it."""

    def __init__(self, rule_set: RuleSet = DEFAULT_RULE_SET) -> None:
        self.rule_set = rule_set
        self._rules = [
            (pattern, _RULE_KINDS[name]) for name, pattern in rule_set.ordered()
        ]

    def iter_tokens(self, line: str) -> Iterator[Token]:
        remaining = line
        while remaining:
            width = _whitespace_run(remaining)
            if width:
                yield Token(remaining[:width], TokenKind.WHITESPACE)
                remaining = remaining[width:]
                continue

            width = 0
            kind = TokenKind.UNKNOWN
            for pattern, rule_kind in self._rules:
                match = pattern.match(remaining)
                if match is not None:
                    width = match.end()
                    kind = rule_kind
                    break

            if width == 0:
                # Zero-length and missing matches both fall back to one character.
                width = 1
                kind = TokenKind.UNKNOWN
            yield Token(remaining[:width], kind)
            remaining = remaining[width:]

    def classify(self, line: str) -> List[Token]:
        return list(self.iter_tokens(line))

    def classify_text(self, text: str) -> List[List[Token]]:
        return [self.classify(line) for line in text.split("\n")]


_DEFAULT_TOKENIZER = Tokenizer()


def classify(line: str, rule_set: RuleSet | None = None) -> List[Token]:
    if rule_set is None or rule_set is DEFAULT_RULE_SET:
        return _DEFAULT_TOKENIZER.classify(line)
    return Tokenizer(rule_set).classify(line)


__all__ = ["Token", "TokenKind", "Tokenizer", "classify"]
