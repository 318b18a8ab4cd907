from __future__ import annotations

from pathlib import Path

import pytest

from modal_engine.config import (
    EditorConfig,
    load_rule_set,
    load_theme,
    read_theme,
    rule_set_for_file,
)
from modal_engine.errors import ThemeError
from modal_engine.syntax import DEFAULT_RULE_SET, DEFAULT_THEME, Colour, TokenKind, Tokenizer

THEME_KEYS = (
    "keyword",
    "ident",
    "lit",
    "delim",
    "types",
    "extra",
    "background",
    "function",
    "comment",
)


def write_syntax(path: Path, **overrides: str) -> Path:
    rules = {
        "keyword": r"^(def|class)\b",
        "identifier": r"^[A-Za-z_][A-Za-z0-9_]*",
        "function": r"^([a-z_]+)(?=\()",
        "delimiters": r"^(\(|\)|:|,)",
        "literal": r"^([0-9]+)",
        "types": r"^([A-Z][A-Za-z0-9_]*)",
        "comment": r"^(#.*)",
        "extra": r"^(=|\+)",
    }
    rules.update(overrides)
    # Literal TOML strings keep regex backslashes intact.
    path.write_text("\n".join(f"{key} = '{value}'" for key, value in rules.items()))
    return path


def write_theme(directory: Path, name: str, colour: str = "#123456") -> Path:
    path = directory / f"{name}.toml"
    path.write_text("\n".join(f'{key} = "{colour}"' for key in THEME_KEYS))
    return path


def test_load_rule_set_from_file(tmp_path: Path) -> None:
    path = write_syntax(tmp_path / "py.toml")

    rule_set = load_rule_set(path)
    tokens = Tokenizer(rule_set).classify("def run(x): # go")

    assert ("def", TokenKind.KEYWORD) in tokens
    assert ("run", TokenKind.FUNCTION) in tokens
    assert ("# go", TokenKind.COMMENT) in tokens


def test_invalid_pattern_falls_back_to_default(tmp_path: Path) -> None:
    path = write_syntax(tmp_path / "py.toml", keyword="^(def")

    assert load_rule_set(path) is DEFAULT_RULE_SET


def test_missing_rule_falls_back_to_default(tmp_path: Path) -> None:
    path = tmp_path / "py.toml"
    path.write_text("keyword = '^(def)'\n")

    assert load_rule_set(path) is DEFAULT_RULE_SET


def test_malformed_toml_falls_back_to_default(tmp_path: Path) -> None:
    path = tmp_path / "py.toml"
    path.write_text("keyword = = broken")

    assert load_rule_set(path) is DEFAULT_RULE_SET


def test_missing_file_falls_back_to_default(tmp_path: Path) -> None:
    assert load_rule_set(tmp_path / "absent.toml") is DEFAULT_RULE_SET


def test_rule_set_for_file_uses_extension(tmp_path: Path) -> None:
    write_syntax(tmp_path / "py.toml")

    rule_set = rule_set_for_file("script.py", syntax_dir=str(tmp_path))

    assert rule_set is not DEFAULT_RULE_SET
    assert Tokenizer(rule_set).classify("class") == [("class", TokenKind.KEYWORD)]


def test_rule_set_for_file_without_extension_or_path(tmp_path: Path) -> None:
    assert rule_set_for_file("Makefile", syntax_dir=str(tmp_path)) is DEFAULT_RULE_SET
    assert rule_set_for_file(None, syntax_dir=str(tmp_path)) is DEFAULT_RULE_SET
    assert rule_set_for_file("x.unknown", syntax_dir=str(tmp_path)) is DEFAULT_RULE_SET


def test_read_theme(tmp_path: Path) -> None:
    write_theme(tmp_path, "ocean")

    theme = read_theme("ocean", theme_dir=str(tmp_path))

    assert theme.keyword == Colour(0x12, 0x34, 0x56)
    assert theme.background.hex == "#123456"


def test_read_theme_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ThemeError):
        read_theme("nope", theme_dir=str(tmp_path))


def test_read_theme_missing_key_raises(tmp_path: Path) -> None:
    (tmp_path / "partial.toml").write_text('keyword = "#ffffff"\n')

    with pytest.raises(ThemeError):
        read_theme("partial", theme_dir=str(tmp_path))


def test_load_theme_falls_back(tmp_path: Path) -> None:
    write_theme(tmp_path, "broken", colour="#zzzzzz")

    assert load_theme("broken", theme_dir=str(tmp_path)) == DEFAULT_THEME
    assert load_theme("absent", theme_dir=str(tmp_path)) == DEFAULT_THEME


def test_colour_parse() -> None:
    assert Colour.parse("#ff8000") == Colour(255, 128, 0)
    assert Colour.parse("00ff00") == Colour(0, 255, 0)

    with pytest.raises(ThemeError):
        Colour.parse("#fff")


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_ENGINE_SYNTAX_DIR", "/tmp/syntax")
    monkeypatch.setenv("MODAL_ENGINE_THEME_DIR", "/tmp/themes")
    monkeypatch.setenv("MODAL_ENGINE_HISTORY_SIZE", "not-a-number")

    config = EditorConfig.from_env()

    assert config.syntax_dir == "/tmp/syntax"
    assert config.theme_dir == "/tmp/themes"
    assert config.history_size == 64


def test_config_for_file_picks_rule_set(tmp_path: Path) -> None:
    write_syntax(tmp_path / "py.toml")
    config = EditorConfig(syntax_dir=str(tmp_path), history_size=8)

    derived = config.for_file("main.py")

    assert derived.rule_set is not DEFAULT_RULE_SET
    assert derived.history_size == 8
    assert derived.theme == config.theme
