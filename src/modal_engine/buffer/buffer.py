"""The editable buffer: a named document plus its cursor."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol

from modal_engine.runtime import telemetry

from .document import LINE_FEED, TextDocument
from .state import BufferState, Position

SCRATCH_NAME = "[scratch]"


@dataclass(slots=True)
class BufferMirror:
    """Read-only copy of what a front end needs to draw the buffer."""

    text: str
    cursor: Position
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    def pull_buffer(self) -> BufferMirror:
        ...


class Buffer:
    """A document bound to a file path (or none, for scratch) and a cursor.

    Edits go through :meth:`insert_character` and
    :meth:`delete_character_at`; each one runs in a ``buffer::<edit>`` span.
    """

    def __init__(
        self,
        *,
        name: str = SCRATCH_NAME,
        path: Optional[str] = None,
        document: Optional[TextDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.path = path
        self.document = document if document is not None else TextDocument()
        self.state = state if state is not None else BufferState()

    @classmethod
    def from_text(
        cls, text: str, *, name: str = SCRATCH_NAME, path: Optional[str] = None
    ) -> "Buffer":
        return cls(name=name, path=path, document=TextDocument(text=text))

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    def line_count(self) -> int:
        return self.document.line_count()

    def line(self, index: int) -> str:
        return self.document.line(index)

    def line_at_cursor(self) -> str:
        return self.document.line(self.cursor.y)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(self.text, self.cursor, dict(attributes or {}))

    def insert_character(self, position: Position, char: str) -> None:
        with self._edit("insert", position):
            self.document.insert_character(position, char)

    def insert_line_break(self, position: Position) -> None:
        self.insert_character(position, LINE_FEED)

    def delete_character_at(self, position: Position) -> None:
        with self._edit("delete", position):
            self.document.delete_character_at(position)

    def mark_clean(self) -> None:
        self.document.dirty = False

    @contextmanager
    def _edit(self, label: str, position: Position) -> Iterator[None]:
        with telemetry.span(
            f"buffer::{label}",
            component="buffer",
            metadata={"buffer": self.name, "position": tuple(position)},
        ) as handle:
            yield
            handle.add_metadata("version", self.document.version)
