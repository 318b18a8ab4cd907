"""Command-line editing and the Ex-style command interpreter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List

from modal_engine.config import read_theme
from modal_engine.errors import FileWriteError, ThemeError
from modal_engine.runtime import telemetry
from modal_engine.session import EditorMode, LogMessage, ModeContext, ModeResult

if TYPE_CHECKING:
    from modal_engine.keymaps import ResolutionMatch

CommandHandler = Callable[[ModeContext, List[str]], ModeResult]

logger = telemetry.get_logger("modal_engine.actions.command")


def append_command_text(context: ModeContext, text: str) -> ModeResult:
    context.session.command += text
    context.bus.emit("command.text", context.session.command)
    return ModeResult(consumed=True, status="editing")


def delete_command_char(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.command = context.session.command[:-1]
    context.bus.emit("command.text", context.session.command)
    return ModeResult(consumed=True, status="editing")


def cancel_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.command = ""
    context.bus.emit("command.cancel", None)
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, message="command_cancel"
    )


def submit_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    text = context.session.command.strip()
    context.session.command = ""
    context.bus.emit("command.submit", text)
    return execute_command(context, text)


def execute_command(context: ModeContext, text: str) -> ModeResult:
    if not text:
        return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, status="command_empty")
    command, _, rest = text.partition(" ")
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        logger.debug("ignoring unknown command %r", text)
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.NORMAL,
            status="command_unknown",
            message=command,
        )
    with telemetry.span(
        "command::execute", component="command", metadata={"command": command}
    ):
        return handler(context, rest.split())


def _write(context: ModeContext) -> bool:
    buffer = context.buffer
    try:
        context.storage.save(buffer.path, buffer.text)
    except FileWriteError as exc:
        context.session.log(LogMessage.error(str(exc)))
        context.bus.emit("command.error", {"command": "write", "reason": str(exc)})
        return False
    buffer.mark_clean()
    context.session.log(LogMessage.info(f"written {buffer.name}"))
    context.bus.emit("command.write", {"path": buffer.path, "text": buffer.text})
    return True


def _quit(context: ModeContext) -> None:
    context.session.halt()
    context.bus.emit("command.quit", None)


def _write_failed() -> ModeResult:
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_write_error",
        message="write",
    )


def _handle_write(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    if not _write(context):
        return _write_failed()
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status="command_write", message="write"
    )


def _handle_quit(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    _quit(context)
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status="command_quit", message="quit"
    )


def _handle_write_quit(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    if not _write(context):
        return _write_failed()
    _quit(context)
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status="command_wq", message="wq"
    )


def _handle_theme(context: ModeContext, args: List[str]) -> ModeResult:
    name = " ".join(args)
    if not name:
        return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, status="command_empty")
    try:
        theme = read_theme(name, theme_dir=context.config.theme_dir)
    except ThemeError as exc:
        context.session.log(LogMessage.warning(str(exc)))
        context.bus.emit("command.error", {"command": "theme", "reason": str(exc)})
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.NORMAL,
            status="command_theme_error",
            message=name,
        )
    context.session.theme = theme
    context.session.theme_name = name
    context.bus.emit("command.theme", name)
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status="command_theme", message=name
    )


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "write": _handle_write,
    "q": _handle_quit,
    "quit": _handle_quit,
    "x": _handle_write_quit,
    "wq": _handle_write_quit,
    "theme": _handle_theme,
}


__all__ = [
    "append_command_text",
    "delete_command_char",
    "cancel_command_line",
    "submit_command_line",
    "execute_command",
]
