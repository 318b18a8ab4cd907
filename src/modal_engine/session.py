"""Editing-session context shared by modes and actions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, Dict, Literal, Optional, Tuple

from modal_engine.buffer import Buffer
from modal_engine.config import DEFAULT_THEME_NAME, EditorConfig
from modal_engine.storage import FileStorage, Storage
from modal_engine.syntax import ColourTheme

ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"


class EditorMode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key`` and from bound actions."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LogMessage:
    level: Literal["info", "warning", "error"] = "info"
    text: str = ""

    @classmethod
    def info(cls, text: str) -> "LogMessage":
        return cls("info", text)

    @classmethod
    def warning(cls, text: str) -> "LogMessage":
        return cls("warning", text)

    @classmethod
    def error(cls, text: str) -> "LogMessage":
        return cls("error", text)


@dataclass(slots=True)
class SessionState:
    """Transient per-session state: key history, command line, messages."""

    key_history: Deque[str] = field(default_factory=lambda: deque(maxlen=64))
    command: str = ""
    message: LogMessage = field(default_factory=LogMessage)
    halted: bool = False
    theme_name: str = DEFAULT_THEME_NAME
    theme: Optional[ColourTheme] = None

    @classmethod
    def with_history(cls, size: int) -> "SessionState":
        return cls(key_history=deque(maxlen=size))

    def previous_key(self) -> Optional[str]:
        return self.key_history[-1] if self.key_history else None

    def remember_key(self, token: str) -> None:
        self.key_history.append(token)

    def log(self, message: LogMessage) -> None:
        self.message = message

    def halt(self) -> None:
        self.halted = True


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Everything a mode or action may touch during one editing session."""

    buffer: Buffer
    bus: ModeBus = field(default_factory=ModeBus)
    config: EditorConfig = field(default_factory=EditorConfig)
    storage: Storage = field(default_factory=FileStorage)
    session: SessionState = field(default_factory=SessionState)
    extras: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        buffer: Optional[Buffer] = None,
        *,
        config: Optional[EditorConfig] = None,
        storage: Optional[Storage] = None,
    ) -> "ModeContext":
        config = config or EditorConfig()
        return cls(
            buffer=buffer or Buffer(),
            config=config,
            storage=storage or FileStorage(),
            session=SessionState.with_history(config.history_size),
        )

    @property
    def theme(self) -> ColourTheme:
        return self.session.theme or self.config.theme


__all__ = [
    "ESC",
    "ENTER",
    "BACKSPACE",
    "EditorMode",
    "KeyInput",
    "ModeResult",
    "LogMessage",
    "SessionState",
    "ModeBus",
    "ModeContext",
]
