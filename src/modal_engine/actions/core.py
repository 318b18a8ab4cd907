"""Mode transitions and session control shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modal_engine.session import EditorMode, ModeContext, ModeResult

if TYPE_CHECKING:
    from modal_engine.keymaps import ResolutionMatch


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, message="exit_to_normal")


def enter_visual_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=EditorMode.VISUAL, message="enter_visual")


def enter_command_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.command = ""
    return ModeResult(consumed=True, switch_to=EditorMode.COMMAND, message="enter_command")


def halt_session(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.halt()
    context.bus.emit("session.halt", None)
    return ModeResult(consumed=True, status="halt", message="quit")


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_visual_mode",
    "enter_command_mode",
    "halt_session",
]
