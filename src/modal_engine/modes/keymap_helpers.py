"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import List

from modal_engine.keymaps import KeymapResolver, KeyStroke, ResolutionMatch
from modal_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key, key.modifiers).token


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


class KeymapMode(Mode):
    """Mode that looks keys up in the keymap before its own fallback."""

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"modal_engine.modes.{self.name}")
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(consumed=True, status="pending", message="awaiting_sequence")

        self._pending.clear()
        return self.handle_unbound(key)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["key_to_token", "require_keymap_resolver", "KeymapMode"]
