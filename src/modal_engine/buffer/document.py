"""Core text storage and position-to-offset addressing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .state import Position

LINE_FEED = "\n"


@dataclass(slots=True)
class TextDocument:
    """Single-string text storage addressed by ``(line, column)`` positions.

    Lines are split on line feeds only. A trailing line feed does not open an
    extra content line, and the empty document has no lines at all; the
    cursor can still sit on those virtual rows.
    """

    text: str = ""
    version: int = 0
    dirty: bool = False

    def lines(self) -> Sequence[str]:
        """Return the content lines without their line feeds."""

        if not self.text:
            return ()
        parts = self.text.split(LINE_FEED)
        if self.text.endswith(LINE_FEED):
            parts.pop()
        return tuple(parts)

    def line_count(self) -> int:
        return len(self.lines())

    def line(self, index: int) -> str:
        """Return line ``index``, or ``""`` for rows with no content."""

        if index < 0:
            return ""
        lines = self.lines()
        if index >= len(lines):
            return ""
        return lines[index]

    def line_length(self, index: int) -> int:
        return len(self.line(index))

    def offset_for(self, position: Position) -> int:
        """Map ``position`` to an index into :attr:`text`.

        Lines before the target row are skipped by their length plus the line
        feed. Within the target row, a column past the end maps to the end of
        that line. A row past the last line yields the summed length of every
        line, which can exceed ``len(text)`` by one.
        """

        y, x = position
        offset = 0
        for index, line in enumerate(self.lines()):
            if index == y:
                return offset + min(max(x, 0), len(line))
            offset += len(line) + 1
        return offset

    def insert_character(self, position: Position, char: str) -> None:
        offset = min(self.offset_for(position), len(self.text))
        self.text = self.text[:offset] + char + self.text[offset:]
        self._touch()

    def delete_character_at(self, position: Position) -> None:
        """Remove the character at ``position``.

        When the position maps at or past the end of the text, the final
        character of the whole text is removed instead.
        """

        if not self.text:
            return
        offset = self.offset_for(position)
        if offset >= len(self.text):
            self.text = self.text[:-1]
        else:
            self.text = self.text[:offset] + self.text[offset + 1 :]
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
