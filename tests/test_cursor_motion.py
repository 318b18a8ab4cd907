from __future__ import annotations

from modal_engine.buffer import Buffer
from modal_engine.motion import (
    Direction,
    at_end_of_file,
    at_end_of_line,
    move_cursor,
    move_to_line_end,
    move_to_line_start,
)


def make_buffer(text: str, y: int = 0, x: int = 0) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.state.set_cursor(y, x)
    return buffer


def test_right_moves_within_line() -> None:
    buffer = make_buffer("abc")

    assert move_cursor(buffer, Direction.RIGHT) == (0, 1)


def test_right_at_line_end_wraps_to_next_line() -> None:
    buffer = make_buffer("ab\ncd", 0, 2)

    assert move_cursor(buffer, Direction.RIGHT) == (1, 0)


def test_left_at_line_start_wraps_to_previous_line_end() -> None:
    buffer = make_buffer("abc\nd", 1, 0)

    assert move_cursor(buffer, Direction.LEFT) == (0, 3)


def test_left_at_origin_stays() -> None:
    buffer = make_buffer("abc")

    assert move_cursor(buffer, Direction.LEFT) == (0, 0)


def test_up_at_first_line_stays() -> None:
    buffer = make_buffer("abc", 0, 2)

    assert move_cursor(buffer, Direction.UP) == (0, 2)


def test_vertical_moves_clamp_column() -> None:
    buffer = make_buffer("abcdef\nab\nabcdef", 0, 5)

    assert move_cursor(buffer, Direction.DOWN) == (1, 2)
    assert move_cursor(buffer, Direction.DOWN) == (2, 2)
    assert move_cursor(buffer, Direction.UP) == (1, 2)


def test_down_stops_past_last_line() -> None:
    buffer = make_buffer("a\nb")

    for _ in range(10):
        move_cursor(buffer, Direction.DOWN)

    assert buffer.cursor.y == buffer.line_count() + 1
    assert at_end_of_file(buffer)


def test_down_on_empty_buffer() -> None:
    buffer = make_buffer("")

    move_cursor(buffer, Direction.DOWN)
    move_cursor(buffer, Direction.DOWN)

    assert buffer.cursor == (1, 0)


def test_line_start_and_end() -> None:
    buffer = make_buffer("hello", 0, 2)

    move_to_line_end(buffer)
    assert buffer.cursor == (0, 5)
    assert at_end_of_line(buffer)

    move_to_line_start(buffer)
    assert buffer.cursor == (0, 0)
