"""Cursor motion and text editing actions for Normal and Insert mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modal_engine.buffer import Position
from modal_engine.motion import (
    Direction,
    move_cursor,
    move_to_end_of_pattern,
    move_to_line_end,
    move_to_line_start,
    move_to_start_of_pattern,
)
from modal_engine.session import EditorMode, ModeContext, ModeResult

if TYPE_CHECKING:
    from modal_engine.keymaps import ResolutionMatch


def _moved(context: ModeContext) -> ModeResult:
    context.bus.emit("cursor.move", context.buffer.cursor)
    return ModeResult(consumed=True, status="cursor_move")


def _step(context: ModeContext, direction: Direction) -> ModeResult:
    move_cursor(context.buffer, direction)
    return _moved(context)


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _step(context, Direction.LEFT)


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _step(context, Direction.RIGHT)


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _step(context, Direction.UP)


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _step(context, Direction.DOWN)


def move_word_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    move_to_end_of_pattern(context.buffer)
    return _moved(context)


def move_word_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    move_to_start_of_pattern(context.buffer)
    return _moved(context)


def move_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    move_to_line_start(context.buffer)
    return _moved(context)


def goto_start_of_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Jump to (0, 0) when the previous key was this same key."""

    trigger = match.binding.sequence.tokens[-1]
    if context.session.previous_key() != trigger:
        return ModeResult(consumed=True, status="awaiting_repeat")
    context.buffer.state.reset_cursor()
    return _moved(context)


def delete_at_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_character_at(context.buffer.cursor)
    return ModeResult(consumed=True, status="delete")


def open_line_below(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    y = buffer.cursor.y
    buffer.insert_line_break(Position(y, len(buffer.line(y))))
    move_cursor(buffer, Direction.DOWN)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="open_below")


def open_line_above(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    y = buffer.cursor.y
    if y == 0:
        buffer.insert_line_break(Position(0, 0))
    else:
        buffer.insert_line_break(Position(y - 1, len(buffer.line(y - 1))))
    # The new empty line now sits at row y.
    buffer.state.set_cursor(y, 0)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="open_above")


def append_at_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    move_to_line_end(context.buffer)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="append")


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert typed text at the cursor, advancing one column per character."""

    buffer = context.buffer
    for char in text:
        buffer.insert_character(buffer.cursor, char)
        move_cursor(buffer, Direction.RIGHT)
    return ModeResult(consumed=True, status="insert")


def insert_line_break(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.insert_line_break(buffer.cursor)
    buffer.state.set_cursor(buffer.cursor.y + 1, 0)
    return ModeResult(consumed=True, status="insert")


def delete_before_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    if buffer.cursor == (0, 0):
        return ModeResult(consumed=True, status="noop")
    # Step left first so a backspace at column 0 removes the previous line feed.
    move_cursor(buffer, Direction.LEFT)
    buffer.delete_character_at(buffer.cursor)
    return ModeResult(consumed=True, status="delete")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_word_end",
    "move_word_start",
    "move_line_start",
    "goto_start_of_buffer",
    "delete_at_cursor",
    "open_line_below",
    "open_line_above",
    "append_at_line_end",
    "insert_text",
    "insert_line_break",
    "delete_before_cursor",
]
