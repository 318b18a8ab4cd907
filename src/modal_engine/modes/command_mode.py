"""Command-line mode: accumulates an Ex-style command string."""

from __future__ import annotations

from modal_engine.actions.command import append_command_text

from .base_mode import EditorMode, KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class CommandMode(KeymapMode):
    mode = EditorMode.COMMAND

    @property
    def current_command(self) -> str:
        return self.context.session.command

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.session.command = ""
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        self.context.session.command = ""
        self.context.bus.emit("command.end", None)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.text and not key.modifiers:
            return append_command_text(self.context, key.text)
        return ModeResult(consumed=False, status="miss", message="unhandled")
