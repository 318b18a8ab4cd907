"""Value types for keys, editor verbs and the bindings between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

from modal_engine.session import EditorMode

if TYPE_CHECKING:
    from modal_engine.session import ModeContext, ModeResult

    from .resolver import ResolutionMatch

    ActionHandler = Callable[[ModeContext, ResolutionMatch], ModeResult]


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press; modifiers are lowercased, deduplicated and sorted."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        cleaned = {m.strip().lower() for m in self.modifiers if m.strip()}
        object.__setattr__(self, "modifiers", tuple(sorted(cleaned)))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Inverse of :attr:`token`: ``"ctrl+x"`` -> ``KeyStroke("x", ("ctrl",))``."""

        # the last character always belongs to the key, so "ctrl++" is ctrl and "+"
        prefix, separator, rest = token[:-1].rpartition("+")
        if not separator:
            return cls(token)
        return cls(rest + token[-1], tuple(prefix.split("+")))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))


@dataclass(frozen=True, slots=True)
class KeySequence:
    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("a key sequence needs at least one stroke")

    @classmethod
    def from_strings(cls, *tokens: str) -> "KeySequence":
        return cls(tuple(KeyStroke.parse(token) for token in tokens if token))

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    def __str__(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named editor verb, invoked as ``handler(context, match)``."""

    id: str
    handler: "ActionHandler"
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id cannot be empty")
        if not callable(self.handler):
            raise TypeError(f"handler for action '{self.id}' must be callable")

    def __call__(self, context: "ModeContext", match: "ResolutionMatch") -> "ModeResult":
        return self.handler(context, match)


@dataclass(frozen=True, slots=True)
class Binding:
    """Key sequence that triggers an action while the editor is in ``mode``."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError(f"binding '{self.id}' has no action")
        # raises ValueError for anything that is not an editor mode
        object.__setattr__(self, "mode", EditorMode(self.mode).value)

    @classmethod
    def for_keys(
        cls,
        mode: EditorMode | str,
        keys: Iterable[str],
        action_id: str,
        description: str = "",
    ) -> "Binding":
        """Build a binding whose id is ``<mode>.<action>.<keys>``."""

        sequence = KeySequence.from_strings(*keys)
        mode_name = EditorMode(mode).value
        return cls(
            id=f"{mode_name}.{action_id}.{''.join(sequence.tokens)}",
            mode=mode_name,
            sequence=sequence,
            action_id=action_id,
            description=description,
        )

    @property
    def key_signature(self) -> str:
        return str(self.sequence)


__all__ = ["KeyStroke", "KeySequence", "ActionRef", "Binding"]
