"""Editing verbs bound to keys by the keymap registry."""

from .command import (
    append_command_text,
    cancel_command_line,
    delete_command_char,
    execute_command,
    submit_command_line,
)
from .core import (
    enter_command_mode,
    enter_insert_mode,
    enter_visual_mode,
    exit_to_normal_mode,
    halt_session,
)
from .editing import (
    append_at_line_end,
    delete_at_cursor,
    delete_before_cursor,
    goto_start_of_buffer,
    insert_line_break,
    insert_text,
    move_down,
    move_left,
    move_line_start,
    move_right,
    move_up,
    move_word_end,
    move_word_start,
    open_line_above,
    open_line_below,
)

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_visual_mode",
    "enter_command_mode",
    "halt_session",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_word_end",
    "move_word_start",
    "move_line_start",
    "goto_start_of_buffer",
    "delete_at_cursor",
    "open_line_below",
    "open_line_above",
    "append_at_line_end",
    "insert_text",
    "insert_line_break",
    "delete_before_cursor",
    "append_command_text",
    "delete_command_char",
    "cancel_command_line",
    "submit_command_line",
    "execute_command",
]
