"""Glue between a ModeManager and the widgets of the Textual front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from modal_engine.buffer import BufferMirror, BufferSync
from modal_engine.modes import KeyInput, ModeManager, ModeResult
from modal_engine.runtime import telemetry

logger = telemetry.get_logger("modal_engine.adapters.textual")

BUS_EVENTS = (
    "cursor.move",
    "mode.switch",
    "command.start",
    "command.end",
    "command.submit",
    "command.cancel",
    "command.text",
    "command.write",
    "command.quit",
    "command.theme",
    "command.error",
    "session.halt",
)


def describe_event(name: str, payload: object | None) -> Optional[str]:
    """Status-line note for events the user should see, else ``None``."""

    if name == "command.write" and isinstance(payload, dict):
        return f'"{payload.get("path")}" written'
    if name == "command.error" and isinstance(payload, dict):
        return f"{payload.get('command')}: {payload.get('reason')}"
    if name == "command.theme":
        return f"theme {payload}"
    return None


def _ignore(*_args: object) -> None:
    return None


@dataclass(slots=True)
class TextualUIHooks:
    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _ignore
    show_command: Callable[[str], None] = _ignore
    handle_event: Callable[[str, object | None], None] = _ignore
    log: Callable[[str], None] = _ignore


class TextualEditorAdapter(BufferSync):
    """Feeds Textual key presses to the manager and pushes the results back.

    After every key the buffer view and the command line are refreshed. The
    status line shows the note of the last user-visible bus event raised by
    the key, falling back to the action's own message.
    """

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._notes: List[str] = []
        for event in BUS_EVENTS:
            manager.context.bus.subscribe(event, self._relay(event))
        self._refresh()

    @property
    def halted(self) -> bool:
        return self.manager.context.session.halted

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        key_input = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        self._trace("key ->", key=key, text=text, modifiers=key_input.modifiers or None)
        self._notes.clear()

        result = self.manager.handle_key(key_input)

        status = self._notes[-1] if self._notes else (result.message or result.status)
        if status:
            self.hooks.update_status(status)
        self._refresh()
        self._trace("result <-", status=result.status, switch_to=result.switch_to)
        return result

    def pull_buffer(self) -> BufferMirror:
        return self.manager.context.buffer.mirror(attributes={"mode": self._mode_name()})

    def _relay(self, name: str) -> Callable[[object | None], None]:
        def relay(payload: object | None) -> None:
            self._trace("event ->", event=name, payload=payload)
            note = describe_event(name, payload)
            if note:
                self._notes.append(note)
            self.hooks.handle_event(name, payload)

        return relay

    def _refresh(self) -> None:
        self.hooks.update_buffer(self.pull_buffer())
        self.hooks.show_command(self.manager.context.session.command)

    def _mode_name(self) -> str:
        mode = self.manager.active_mode
        return mode.name if mode else ""

    def _trace(self, prefix: str, **fields: object) -> None:
        buffer = self.manager.context.buffer
        state = {
            "mode": self._mode_name() or "?",
            "cursor": tuple(buffer.cursor),
            "command": self.manager.context.session.command,
            "halted": self.halted,
            "version": buffer.document.version,
        }
        state.update((k, v) for k, v in fields.items() if v is not None)
        line = " ".join([prefix, *(f"{k}={v!r}" for k, v in state.items())])
        logger.debug(line)
        self.hooks.log(line)


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "BUS_EVENTS", "describe_event"]
