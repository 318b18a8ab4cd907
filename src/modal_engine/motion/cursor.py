"""Directional cursor motion over a buffer."""

from __future__ import annotations

from enum import Enum

from modal_engine.buffer import Buffer, Position


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def at_start_of_file(buffer: Buffer) -> bool:
    return buffer.cursor.y == 0


def at_end_of_file(buffer: Buffer) -> bool:
    # One row past the last content line stays reachable.
    return buffer.cursor.y >= buffer.line_count() + 1


def at_start_of_line(buffer: Buffer) -> bool:
    return buffer.cursor.x == 0


def at_end_of_line(buffer: Buffer) -> bool:
    return buffer.cursor.x >= len(buffer.line_at_cursor())


def move_to_next_line(buffer: Buffer) -> None:
    buffer.state.set_cursor(buffer.cursor.y + 1, 0)


def move_to_previous_line(buffer: Buffer) -> None:
    y = buffer.cursor.y - 1
    buffer.state.set_cursor(y, len(buffer.line(y)))


def move_to_line_start(buffer: Buffer) -> None:
    buffer.state.set_cursor(buffer.cursor.y, 0)


def move_to_line_end(buffer: Buffer) -> None:
    buffer.state.set_cursor(buffer.cursor.y, len(buffer.line_at_cursor()))


def _clamp_column(buffer: Buffer, y: int, x: int) -> Position:
    return Position(y, min(x, len(buffer.line(y))))


def move_cursor(buffer: Buffer, direction: Direction) -> Position:
    """Move the buffer's cursor one step and return the new position."""

    y, x = buffer.cursor
    if direction is Direction.UP:
        if not at_start_of_file(buffer):
            buffer.state.cursor = _clamp_column(buffer, y - 1, x)
    elif direction is Direction.DOWN:
        if not at_end_of_file(buffer):
            buffer.state.cursor = _clamp_column(buffer, y + 1, x)
    elif direction is Direction.LEFT:
        if at_start_of_file(buffer) and at_start_of_line(buffer):
            return buffer.cursor
        if at_start_of_line(buffer):
            move_to_previous_line(buffer)
        else:
            buffer.state.set_cursor(y, x - 1)
    elif direction is Direction.RIGHT:
        if at_end_of_line(buffer):
            move_to_next_line(buffer)
        else:
            buffer.state.set_cursor(y, x + 1)
    return buffer.cursor


__all__ = [
    "Direction",
    "at_start_of_file",
    "at_end_of_file",
    "at_start_of_line",
    "at_end_of_line",
    "move_cursor",
    "move_to_next_line",
    "move_to_previous_line",
    "move_to_line_start",
    "move_to_line_end",
]
