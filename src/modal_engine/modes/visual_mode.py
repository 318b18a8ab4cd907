"""Visual mode: entered and left, selection itself is not tracked."""

from __future__ import annotations

from .base_mode import EditorMode, KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class VisualMode(KeymapMode):
    mode = EditorMode.VISUAL

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=True, status="ignored")
