"""Resolve pending key tokens against the bindings of the active mode."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

from modal_engine.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class _Node:
    binding_id: Optional[str] = None
    children: Dict[str, "_Node"] = field(default_factory=dict)


def _build_trie(registry: KeymapRegistry, mode: str) -> _Node:
    root = _Node()
    for binding in registry.bindings_for(mode):
        node = root
        for token in binding.sequence.tokens:
            node = node.children.setdefault(token, _Node())
        node.binding_id = binding.id
    return root


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """The binding that fired and the action it names; passed to every action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """``pending`` means the tokens are a strict prefix of some binding."""

    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Walks a per-mode trie, rebuilt whenever the registry revision moves."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tries: Dict[str, tuple[int, _Node]] = {}

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "keys": " ".join(tokens)},
        ) as handle:
            result = self._walk(self._trie(mode), tokens)
            handle.add_metadata("status", result.status)
            if result.match is not None:
                handle.add_metadata("binding_id", result.match.binding.id)
            return result

    def _walk(self, node: _Node, tokens: Sequence[str]) -> ResolutionResult:
        for consumed, token in enumerate(tokens):
            child = node.children.get(token)
            if child is None:
                return ResolutionResult(status="miss", consumed=consumed)
            node = child

        consumed = len(tokens)
        if node.binding_id is not None:
            binding = self._registry.get_binding(node.binding_id)
            match = ResolutionMatch(binding, self._registry.get_action(binding.action_id))
            return ResolutionResult(status="match", match=match, consumed=consumed)
        if node.children and consumed:
            return ResolutionResult(
                status="pending",
                consumed=consumed,
                next_expected=tuple(sorted(node.children)),
            )
        return ResolutionResult(status="miss", consumed=consumed)

    def _trie(self, mode: str) -> _Node:
        cached = self._tries.get(mode)
        if cached is not None and cached[0] == self._registry.revision:
            return cached[1]
        root = _build_trie(self._registry, mode)
        self._tries[mode] = (self._registry.revision, root)
        return root


__all__ = ["KeymapResolver", "ResolutionResult", "ResolutionMatch"]
