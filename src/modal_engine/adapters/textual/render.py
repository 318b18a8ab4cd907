"""Turn buffer lines into styled ``rich`` text for the Textual view."""

from __future__ import annotations

from typing import Iterable

from rich.style import Style
from rich.text import Text

from modal_engine.buffer import Position
from modal_engine.syntax import ColourTheme, TokenKind, Tokenizer


def scroll_offset(cursor_line: int, viewport_height: int) -> int:
    """First visible line so that ``cursor_line`` stays on screen."""

    return max(0, cursor_line + 1 - viewport_height)


def token_colour(kind: TokenKind, theme: ColourTheme) -> str:
    colour = {
        TokenKind.KEYWORD: theme.keyword,
        TokenKind.IDENTIFIER: theme.ident,
        TokenKind.LITERAL: theme.lit,
        TokenKind.DELIMITER: theme.delim,
        TokenKind.TYPE: theme.types,
        TokenKind.EXTRA: theme.extra,
        TokenKind.FUNCTION: theme.function,
        TokenKind.COMMENT: theme.comment,
        TokenKind.WHITESPACE: theme.delim,
        TokenKind.UNKNOWN: theme.extra,
    }[kind]
    return colour.hex


def highlight_line(line: str, tokenizer: Tokenizer, theme: ColourTheme) -> Text:
    background = theme.background.hex
    text = Text(style=Style(bgcolor=background))
    for token in tokenizer.iter_tokens(line):
        style = Style(color=token_colour(token.kind, theme), bgcolor=background)
        text.append(token.text, style=style)
    return text


def mark_cursor(line: Text, column: int) -> Text:
    """Show the cursor as a reversed cell, padding when it sits past the end."""

    if column >= len(line):
        line.append(" " * (column - len(line) + 1))
    line.stylize("reverse", column, column + 1)
    return line


def highlight_text(
    lines: Iterable[str],
    tokenizer: Tokenizer,
    theme: ColourTheme,
    *,
    start: int = 0,
    height: int | None = None,
    cursor: Position | None = None,
) -> Text:
    """Highlight the visible window ``lines[start:start + height]``.

    When ``cursor`` is given its cell is marked; a cursor on a row past the
    last line gets empty rows drawn up to it.
    """

    all_lines = list(lines)
    if cursor is not None and cursor.y >= len(all_lines):
        all_lines.extend([""] * (cursor.y - len(all_lines) + 1))
    visible = all_lines[start:]
    if height is not None:
        visible = visible[: max(height, 0)]
    rendered = Text(style=Style(bgcolor=theme.background.hex))
    for index, line in enumerate(visible):
        if index:
            rendered.append("\n")
        styled = highlight_line(line, tokenizer, theme)
        if cursor is not None and cursor.y == start + index:
            mark_cursor(styled, cursor.x)
        rendered.append_text(styled)
    return rendered


__all__ = [
    "scroll_offset",
    "token_colour",
    "highlight_line",
    "mark_cursor",
    "highlight_text",
]
