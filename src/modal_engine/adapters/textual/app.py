"""Executable Textual app that hosts the modal editing engine."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from modal_engine.buffer import SCRATCH_NAME, Buffer, BufferMirror
from modal_engine.config import EditorConfig
from modal_engine.modes import ModeContext, ModeManager
from modal_engine.runtime import telemetry
from modal_engine.session import BACKSPACE, ENTER, ESC, EditorMode
from modal_engine.storage import FileStorage, Storage
from modal_engine.syntax import Tokenizer

from .controller import TextualUIHooks, TextualEditorAdapter
from .render import highlight_text, scroll_offset

logger = telemetry.get_logger("modal_engine.adapters.textual")


def create_default_manager(
    file_path: Optional[str] = None,
    *,
    config: Optional[EditorConfig] = None,
    storage: Optional[Storage] = None,
) -> ModeManager:
    """Load ``file_path`` into a buffer and build a manager over it."""

    storage = storage or FileStorage()
    config = (config or EditorConfig.from_env()).for_file(file_path)
    name = Path(file_path).name if file_path else SCRATCH_NAME
    buffer = Buffer.from_text(storage.load(file_path), name=name, path=file_path)
    context = ModeContext.create(buffer, config=config, storage=storage)
    return ModeManager.with_default_modes(context)


class ModalEditorApp(App[None]):
    """Buffer view, status line and command line over one ModeManager."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, file_path: Optional[str] = None) -> None:
        super().__init__()
        self.file_path = file_path
        self.manager: Optional[ModeManager] = None
        self.adapter: Optional[TextualEditorAdapter] = None
        self.tokenizer: Optional[Tokenizer] = None
        self._status = ""
        self._buffer_widget: Optional[Static] = None
        self._status_widget: Optional[Static] = None
        self._command_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    async def on_mount(self) -> None:
        self.manager = create_default_manager(self.file_path)
        self.tokenizer = Tokenizer(self.manager.context.config.rule_set)
        self.title = self.manager.context.buffer.name
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            handle_event=self._handle_event,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        if self.adapter.halted:
            self.exit()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if not (self._buffer_widget and self.manager and self.tokenizer):
            return
        height = self._buffer_widget.size.height or 1
        start = scroll_offset(mirror.cursor.y, height)
        rendered = highlight_text(
            self.manager.context.buffer.document.lines(),
            self.tokenizer,
            self.manager.context.theme,
            start=start,
            height=height,
            cursor=mirror.cursor,
        )
        self._buffer_widget.update(rendered)
        self._render_status_line(mirror)

    def _update_status(self, status: str) -> None:
        self._status = status

    def _render_status_line(self, mirror: BufferMirror) -> None:
        if not (self._status_widget and self.manager):
            return
        mode = mirror.attributes.get("mode", "").upper()
        message = self.manager.context.session.message.text
        y, x = mirror.cursor
        self._status_widget.update(
            f"{mode}  {y + 1}:{x + 1}  {message or self._status}"
        )

    def _show_command(self, command: str) -> None:
        if self._command_widget and self.manager:
            in_command = self.manager.mode is EditorMode.COMMAND
            self._command_widget.update(f":{command}" if in_command else "")

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.error":
            logger.warning("command failed: %s", payload)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key == "escape":
            return (ESC, None, ())
        if key in {"enter", "return"}:
            return (ENTER, None, ())
        if key in {"backspace", "ctrl+h"}:
            return (BACKSPACE, None, ())
        if key.startswith("ctrl+"):
            return (key[len("ctrl+"):], None, ("ctrl",))
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Modal terminal text editor.")
    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="File to open; omit for an unnamed scratch buffer",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    # The terminal belongs to the UI, so log lines go to a file.
    telemetry.configure(preset="production")
    app = ModalEditorApp(file_path=args.file_path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
