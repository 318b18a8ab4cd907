"""Rule sets, tokenizer and colour themes for syntax highlighting."""

from .rules import DEFAULT_RULE_SET, DEFAULT_RULE_SOURCES, RuleSet
from .theme import DEFAULT_THEME, Colour, ColourTheme
from .tokenizer import Token, TokenKind, Tokenizer, classify

__all__ = [
    "RuleSet",
    "DEFAULT_RULE_SET",
    "DEFAULT_RULE_SOURCES",
    "Colour",
    "ColourTheme",
    "DEFAULT_THEME",
    "Token",
    "TokenKind",
    "Tokenizer",
    "classify",
]
