"""Base class all editor modes inherit from."""

from __future__ import annotations

from typing import Optional

from modal_engine.session import (
    EditorMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
)


class Mode:
    """One interpretation context for key input."""

    mode: EditorMode = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def name(self) -> str:
        return self.mode.value

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["Mode", "EditorMode", "KeyInput", "ModeBus", "ModeContext", "ModeResult"]
