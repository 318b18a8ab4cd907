"""Cursor positions and the per-buffer cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """A ``(y, x)`` location counted in characters, both zero-based."""

    y: int
    x: int


ORIGIN = Position(0, 0)


@dataclass(slots=True)
class BufferState:
    cursor: Position = ORIGIN

    def set_cursor(self, y: int, x: int) -> None:
        self.cursor = Position(y, x)

    def reset_cursor(self) -> None:
        self.cursor = ORIGIN
