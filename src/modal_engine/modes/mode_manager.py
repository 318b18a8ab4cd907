"""Owner of the four editor modes and of the key dispatch between them."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from modal_engine.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from modal_engine.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .keymap_helpers import key_to_token
from .normal_mode import NormalMode
from .visual_mode import VisualMode

DEFAULT_MODES: tuple[Type[Mode], ...] = (NormalMode, InsertMode, VisualMode, CommandMode)

logger = telemetry.get_logger("modal_engine.modes")


class ModeManager:
    """Routes each key to the active mode and applies the requested switch.

    The first registered mode becomes active. Without an explicit registry
    the built-in keymaps are loaded, unless ``load_defaults`` is false.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="modal_engine.keymaps")
            if load_defaults:
                load_default_keymaps(keymap_registry)
        if keymap_resolver is None:
            keymap_resolver = KeymapResolver(keymap_registry, logger_name="modal_engine.keymaps")

        self.context = context
        self.keymap_registry = keymap_registry
        self.keymap_resolver = keymap_resolver
        # modes find the resolver here when they are constructed
        context.extras.setdefault("keymap_resolver", keymap_resolver)
        self._modes: Dict[EditorMode, Mode] = {}
        self._active: Optional[EditorMode] = None

    @classmethod
    def with_default_modes(cls, context: ModeContext, **kwargs: object) -> "ModeManager":
        manager = cls(context, **kwargs)  # type: ignore[arg-type]
        manager.register_modes(DEFAULT_MODES)
        return manager

    @property
    def mode(self) -> Optional[EditorMode]:
        return self._active

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self._active) if self._active else None

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        if mode_cls.mode in self._modes:
            raise ValueError(f"Mode '{mode_cls.mode.value}' already registered")
        mode = mode_cls(self.context)
        self._modes[mode.mode] = mode
        if self._active is None:
            self._active = mode.mode
            mode.on_enter(None)
        return mode

    def register_modes(self, mode_classes: Iterable[Type[Mode]]) -> None:
        for mode_cls in mode_classes:
            self.register_mode(mode_cls)

    def switch_mode(self, target: str | EditorMode) -> None:
        """Leave the active mode and enter ``target``; no-op if already there."""

        target = EditorMode(target)
        if target not in self._modes:
            raise KeyError(f"Mode '{target.value}' is not registered")
        if target is self._active:
            return

        previous = self.active_mode
        if previous is not None:
            previous.on_exit(target.value)
        self._active = target
        self._modes[target].on_enter(previous.name if previous else None)

        logger.debug("mode %s -> %s", previous.name if previous else None, target.value)
        self.context.bus.emit("mode.switch", target.value)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No mode registered")

        with telemetry.span(
            f"mode::{mode.name}",
            component="modes",
            metadata={"key": key.key},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)

        # after dispatch, so the action saw the key before this one as previous
        self.context.session.remember_key(key_to_token(key))
        if result.switch_to is not None:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager", "DEFAULT_MODES"]
