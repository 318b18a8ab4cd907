"""Storage for editor actions and the key bindings that reach them."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from modal_engine.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a mode already binds the same key sequence."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"'{binding.key_signature}' in {binding.mode} mode is already bound by "
            f"'{existing.id}' (while registering '{binding.id}')"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Actions by id plus, per mode, a map from key signature to binding.

    ``revision`` increases whenever the bindings change so resolvers know
    when to rebuild their tries.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_mode: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self.revision = 0

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, binding_id: object) -> bool:
        return binding_id in self._bindings

    def action_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self._actions))

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(mode for mode, keys in self._by_mode.items() if keys))

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def lookup(self, mode: str, signature: str) -> Optional[Binding]:
        binding_id = self._by_mode.get(mode, {}).get(signature)
        return self._bindings[binding_id] if binding_id else None

    def bindings_for(self, mode: str) -> Iterator[Binding]:
        """Bindings of one mode ordered by key signature."""

        keys = self._by_mode.get(mode, {})
        for signature in sorted(keys):
            yield self._bindings[keys[signature]]

    def __iter__(self) -> Iterator[Binding]:
        return iter(tuple(self._bindings.values()))

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind ``binding.sequence`` in ``binding.mode``.

        With ``replace`` the new binding evicts both an older binding with
        the same id and whatever currently owns the key sequence.
        """

        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "keys": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            existing = self.lookup(binding.mode, binding.key_signature)
            if not replace:
                if existing is not None:
                    raise KeymapConflictError(binding, existing)
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
            else:
                for stale in (existing, self._bindings.get(binding.id)):
                    if stale is not None:
                        handle.add_metadata("replaced", stale.id)
                        self._drop(stale)

            self._bindings[binding.id] = binding
            self._by_mode.setdefault(binding.mode, {})[binding.key_signature] = binding.id
            self.revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self.revision += 1
        return binding

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        keys = self._by_mode.get(binding.mode, {})
        if keys.get(binding.key_signature) == binding.id:
            del keys[binding.key_signature]


__all__ = ["KeymapRegistry", "KeymapConflictError"]
