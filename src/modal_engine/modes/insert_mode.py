"""Insert mode: typed text goes into the buffer at the cursor."""

from __future__ import annotations

from modal_engine.actions.editing import insert_text

from .base_mode import EditorMode, KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class InsertMode(KeymapMode):
    mode = EditorMode.INSERT

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.text and not key.modifiers:
            return insert_text(self.context, key.text)
        return ModeResult(consumed=False, status="miss", message="unhandled")
