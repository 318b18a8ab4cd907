"""Cursor motion: directional steps and pattern-driven word motion."""

from .cursor import (
    Direction,
    at_end_of_file,
    at_end_of_line,
    at_start_of_file,
    at_start_of_line,
    move_cursor,
    move_to_line_end,
    move_to_line_start,
    move_to_next_line,
    move_to_previous_line,
)
from .patterns import (
    WORD_PATTERN,
    compile_motion_pattern,
    move_to_end_of_pattern,
    move_to_start_of_pattern,
)

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
    "WORD_PATTERN",
    "compile_motion_pattern",
    "move_to_end_of_pattern",
    "move_to_start_of_pattern",
]
