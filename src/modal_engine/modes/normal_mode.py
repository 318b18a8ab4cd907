"""Normal mode: motions, single-key edits and mode entry."""

from __future__ import annotations

from .base_mode import EditorMode
from .keymap_helpers import KeymapMode


class NormalMode(KeymapMode):
    mode = EditorMode.NORMAL
