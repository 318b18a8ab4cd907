"""Ordered classification rules driving the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Mapping

import regex

from modal_engine.errors import InvalidPatternConfiguration

# Keys used by syntax files, in the order the tokenizer tries them.
RULE_FILE_KEYS: tuple[tuple[str, str], ...] = (
    ("comment", "comment"),
    ("literal", "literal"),
    ("keyword", "keyword"),
    ("function", "function"),
    ("type", "types"),
    ("identifier", "identifier"),
    ("extra", "extra"),
    ("delimiter", "delimiters"),
)


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Eight compiled patterns, each tried against the start of its input.

    Field order is priority order: comments and literals come first so quoted
    text is never read as code, keywords precede identifiers, and the more
    specific function and type classes precede the generic identifier.
    """

    comment: regex.Pattern[str]
    literal: regex.Pattern[str]
    keyword: regex.Pattern[str]
    function: regex.Pattern[str]
    type: regex.Pattern[str]
    identifier: regex.Pattern[str]
    extra: regex.Pattern[str]
    delimiter: regex.Pattern[str]

    @classmethod
    def compile(
        cls,
        *,
        comment: str,
        literal: str,
        keyword: str,
        function: str,
        type: str,
        identifier: str,
        extra: str,
        delimiter: str,
    ) -> "RuleSet":
        sources = {
            "comment": comment,
            "literal": literal,
            "keyword": keyword,
            "function": function,
            "type": type,
            "identifier": identifier,
            "extra": extra,
            "delimiter": delimiter,
        }
        compiled = {name: _compile_rule(name, source) for name, source in sources.items()}
        return cls(**compiled)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "RuleSet":
        """Build a rule set from a syntax-file table (``types``, ``delimiters``...)."""

        sources: dict[str, str] = {}
        for name, key in RULE_FILE_KEYS:
            value = data.get(key)
            if not isinstance(value, str):
                raise InvalidPatternConfiguration(
                    f"Syntax rule '{key}' is missing or not a string", rule=name
                )
            sources[name] = value
        return cls.compile(**sources)

    def ordered(self) -> Iterator[tuple[str, regex.Pattern[str]]]:
        for item in fields(self):
            yield item.name, getattr(self, item.name)


def _compile_rule(name: str, source: str) -> regex.Pattern[str]:
    try:
        return regex.compile(source)
    except regex.error as exc:
        raise InvalidPatternConfiguration(
            f"Syntax rule '{name}' failed to compile: {exc}", rule=name
        ) from exc


DEFAULT_RULE_SOURCES: Mapping[str, str] = {
    "keyword": (
        r"^(fn|cfg|super|let|mut|mod|pub|const|impl|static|for|use|while|match"
        r"|if|else|break|continue|struct|enum|self)\b"
    ),
    "identifier": r"^[A-Za-z_][A-Za-z0-9_]*",
    "delimiters": r"^(\(|\)|\||\{|\}|\[|\]|;|:|,|<|>|\?|\#)",
    "literal": r'^(r\#".*"\#|".*"|[0-9]+)',
    "types": r"^([A-Z][A-Za-z0-9_]*|str)",
    "extra": r"^(==|!=|<=|>=|=|\+|-|\*|/|\.\.|=>)",
    "function": r"^([a-z][a-z_0-9]*)(?=\()",
    "comment": r"^(//.*|/\*([\s\S]*?)\*/)",
}

DEFAULT_RULE_SET = RuleSet.from_mapping(DEFAULT_RULE_SOURCES)


__all__ = ["RuleSet", "RULE_FILE_KEYS", "DEFAULT_RULE_SOURCES", "DEFAULT_RULE_SET"]
