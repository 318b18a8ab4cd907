"""Editor configuration and syntax/theme file loading.

Syntax rule sets and colour themes live in TOML files. A file that is
missing, unreadable or invalid never stops the editor: the embedded defaults
are used instead and a warning is logged.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml

from modal_engine.errors import InvalidPatternConfiguration, ThemeError
from modal_engine.runtime import telemetry
from modal_engine.syntax import DEFAULT_RULE_SET, DEFAULT_THEME, ColourTheme, RuleSet

ENV_PREFIX = telemetry.ENV_PREFIX
DEFAULT_THEME_NAME = "default"

logger = telemetry.get_logger("modal_engine.config")


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    syntax_dir: str = "syntax"
    theme_dir: str = "theme"
    history_size: int = 64
    rule_set: RuleSet = DEFAULT_RULE_SET
    theme: ColourTheme = DEFAULT_THEME

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            syntax_dir=os.environ.get(f"{ENV_PREFIX}SYNTAX_DIR", "syntax"),
            theme_dir=os.environ.get(f"{ENV_PREFIX}THEME_DIR", "theme"),
            history_size=max(2, _env_int("HISTORY_SIZE", 64)),
        )

    def for_file(self, file_path: Optional[str]) -> "EditorConfig":
        """Return a copy whose rule set matches ``file_path``'s extension."""

        return EditorConfig(
            syntax_dir=self.syntax_dir,
            theme_dir=self.theme_dir,
            history_size=self.history_size,
            rule_set=rule_set_for_file(file_path, syntax_dir=self.syntax_dir),
            theme=self.theme,
        )


def load_rule_set(path: str | Path) -> RuleSet:
    try:
        data = toml.load(str(path))
        return RuleSet.from_mapping(data)
    except (OSError, toml.TomlDecodeError, InvalidPatternConfiguration) as exc:
        telemetry.record_event(
            "config.rule_set_fallback",
            level="warning",
            data={"path": str(path), "reason": str(exc)},
        )
        return DEFAULT_RULE_SET


def rule_set_for_file(file_path: Optional[str], *, syntax_dir: str = "syntax") -> RuleSet:
    if not file_path:
        return DEFAULT_RULE_SET
    extension = Path(file_path).suffix.lstrip(".")
    if not extension:
        return DEFAULT_RULE_SET
    candidate = Path(syntax_dir) / f"{extension}.toml"
    if not candidate.is_file():
        logger.debug("no syntax file at %s, using default rules", candidate)
        return DEFAULT_RULE_SET
    return load_rule_set(candidate)


def theme_path(name: str, *, theme_dir: str = "theme") -> Path:
    return Path(theme_dir) / f"{name}.toml"


def read_theme(name: str, *, theme_dir: str = "theme") -> ColourTheme:
    """Load ``<theme_dir>/<name>.toml``, raising ``ThemeError`` on any failure."""

    path = theme_path(name, theme_dir=theme_dir)
    try:
        data = toml.load(str(path))
    except (OSError, toml.TomlDecodeError) as exc:
        raise ThemeError(f"Cannot read theme {str(path)!r}: {exc}") from exc
    return ColourTheme.from_mapping(data)


def load_theme(name: Optional[str], *, theme_dir: str = "theme") -> ColourTheme:
    """Like ``read_theme`` but falls back to the embedded theme."""

    name = name or DEFAULT_THEME_NAME
    try:
        return read_theme(name, theme_dir=theme_dir)
    except ThemeError as exc:
        telemetry.record_event(
            "config.theme_fallback",
            level="warning",
            data={"theme": name, "reason": str(exc)},
        )
        return DEFAULT_THEME


__all__ = [
    "EditorConfig",
    "DEFAULT_THEME_NAME",
    "load_rule_set",
    "rule_set_for_file",
    "read_theme",
    "load_theme",
    "theme_path",
]
