"""Mode manager and per-mode dispatch logic."""

from .base_mode import EditorMode, KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .keymap_helpers import KeymapMode, key_to_token
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .command_mode import CommandMode
from .mode_manager import DEFAULT_MODES, ModeManager

__all__ = [
    "EditorMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "KeymapMode",
    "key_to_token",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "CommandMode",
    "ModeManager",
    "DEFAULT_MODES",
]
