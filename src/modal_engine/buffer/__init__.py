"""Buffer storage, cursor state and position addressing."""

from .buffer import SCRATCH_NAME, Buffer, BufferMirror, BufferSync
from .document import LINE_FEED, TextDocument
from .state import ORIGIN, BufferState, Position

__all__ = [
    "TextDocument",
    "BufferState",
    "Buffer",
    "BufferMirror",
    "BufferSync",
    "Position",
    "ORIGIN",
    "LINE_FEED",
    "SCRATCH_NAME",
]
