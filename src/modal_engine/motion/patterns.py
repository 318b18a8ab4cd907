"""Word-class motion driven by classification patterns.

A motion pattern is matched against the text next to the cursor on the
current line only. Moving forward matches the slice from the cursor to the end
of the line; moving backward matches the text before the cursor, reversed, so
the same pattern describes both directions.
"""

from __future__ import annotations

import regex

from modal_engine.buffer import Buffer, Position
from modal_engine.errors import InvalidPatternConfiguration

# One run of a single Unicode category class.
WORD_PATTERN_SOURCE = r"(\p{Z}+|\p{P}+|\p{N}+|\p{L}+|\p{S}+)"


def compile_motion_pattern(source: str) -> regex.Pattern[str]:
    try:
        return regex.compile(source)
    except regex.error as exc:
        raise InvalidPatternConfiguration(
            f"Motion pattern {source!r} failed to compile: {exc}", rule="motion"
        ) from exc


WORD_PATTERN = compile_motion_pattern(WORD_PATTERN_SOURCE)


def move_to_end_of_pattern(
    buffer: Buffer, pattern: regex.Pattern[str] = WORD_PATTERN
) -> Position:
    y, x = buffer.cursor
    remaining = buffer.line(y)[x:]
    match = pattern.match(remaining)
    if match is None:
        return buffer.cursor
    buffer.state.set_cursor(y, x + match.end())
    return buffer.cursor


def move_to_start_of_pattern(
    buffer: Buffer, pattern: regex.Pattern[str] = WORD_PATTERN
) -> Position:
    y, x = buffer.cursor
    before = buffer.line(y)[: max(x, 0)]
    match = pattern.match(before[::-1])
    if match is None:
        return buffer.cursor
    buffer.state.set_cursor(y, max(0, x - match.end()))
    return buffer.cursor


__all__ = [
    "WORD_PATTERN",
    "WORD_PATTERN_SOURCE",
    "compile_motion_pattern",
    "move_to_end_of_pattern",
    "move_to_start_of_pattern",
]
