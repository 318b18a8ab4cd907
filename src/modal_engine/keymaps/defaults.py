"""Built-in keymaps that seed each mode with the editor's key policy."""

from __future__ import annotations

from typing import Iterable

from modal_engine.actions import command as command_actions
from modal_engine.actions import core as core_actions
from modal_engine.actions import editing as editing_actions
from modal_engine.session import BACKSPACE, ENTER, ESC, EditorMode

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"),
    ActionRef("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
    ActionRef("core.enter_visual", core_actions.enter_visual_mode, "Enter visual mode"),
    ActionRef("core.enter_command", core_actions.enter_command_mode, "Enter command-line mode"),
    ActionRef("core.halt", core_actions.halt_session, "Quit the editor"),
    ActionRef("cursor.left", editing_actions.move_left, "Move left"),
    ActionRef("cursor.right", editing_actions.move_right, "Move right"),
    ActionRef("cursor.up", editing_actions.move_up, "Move up"),
    ActionRef("cursor.down", editing_actions.move_down, "Move down"),
    ActionRef("cursor.word_end", editing_actions.move_word_end, "Move to end of word"),
    ActionRef("cursor.word_start", editing_actions.move_word_start, "Move to start of word"),
    ActionRef("cursor.line_start", editing_actions.move_line_start, "Move to start of line"),
    ActionRef(
        "cursor.buffer_start",
        editing_actions.goto_start_of_buffer,
        "Move to start of buffer on a repeated press",
    ),
    ActionRef("edit.delete_at_cursor", editing_actions.delete_at_cursor, "Delete under cursor"),
    ActionRef("edit.open_below", editing_actions.open_line_below, "Open a line below"),
    ActionRef("edit.open_above", editing_actions.open_line_above, "Open a line above"),
    ActionRef("edit.append", editing_actions.append_at_line_end, "Append at end of line"),
    ActionRef("insert.line_break", editing_actions.insert_line_break, "Insert a line break"),
    ActionRef("insert.backspace", editing_actions.delete_before_cursor, "Delete before cursor"),
    ActionRef("command.submit_line", command_actions.submit_command_line, "Run the command line"),
    ActionRef("command.cancel_line", command_actions.cancel_command_line, "Discard the command line"),
    ActionRef("command.backspace", command_actions.delete_command_char, "Delete last command character"),
)



DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding.for_keys(mode, (key,), action_id, description)
    for mode, key, action_id, description in (
        (EditorMode.NORMAL, "q", "core.halt", "Quit"),
        (EditorMode.NORMAL, "i", "core.enter_insert", "Enter insert mode"),
        (EditorMode.NORMAL, "v", "core.enter_visual", "Enter visual mode"),
        (EditorMode.NORMAL, ":", "core.enter_command", "Enter command-line mode"),
        (EditorMode.NORMAL, "h", "cursor.left", ""),
        (EditorMode.NORMAL, "j", "cursor.down", ""),
        (EditorMode.NORMAL, "k", "cursor.up", ""),
        (EditorMode.NORMAL, "l", "cursor.right", ""),
        (EditorMode.NORMAL, "e", "cursor.word_end", ""),
        (EditorMode.NORMAL, "b", "cursor.word_start", ""),
        (EditorMode.NORMAL, "0", "cursor.line_start", ""),
        # gg is a single "g" binding that checks the previous key
        (EditorMode.NORMAL, "g", "cursor.buffer_start", "gg: go to start of buffer"),
        (EditorMode.NORMAL, "d", "edit.delete_at_cursor", ""),
        (EditorMode.NORMAL, "o", "edit.open_below", ""),
        (EditorMode.NORMAL, "O", "edit.open_above", ""),
        (EditorMode.NORMAL, "A", "edit.append", ""),
        (EditorMode.INSERT, ESC, "core.exit_to_normal", "Leave insert mode"),
        (EditorMode.INSERT, ENTER, "insert.line_break", ""),
        (EditorMode.INSERT, BACKSPACE, "insert.backspace", ""),
        (EditorMode.VISUAL, ESC, "core.exit_to_normal", "Leave visual mode"),
        (EditorMode.VISUAL, "v", "core.exit_to_normal", "Leave visual mode"),
        (EditorMode.COMMAND, ESC, "command.cancel_line", "Cancel command line"),
        (EditorMode.COMMAND, ENTER, "command.submit_line", "Submit the command line"),
        (EditorMode.COMMAND, BACKSPACE, "command.backspace", ""),
    )
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    skip: Iterable[str] = (),
    overrides: Iterable[Binding] = (),
) -> KeymapRegistry:
    """Register every built-in action and binding.

    Binding ids listed in ``skip`` are left out. ``overrides`` are registered
    last and replace whatever default owns the same id or key sequence.
    """

    skipped = set(skip)
    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        if binding.id not in skipped:
            registry.register_binding(binding)
    for binding in overrides:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
