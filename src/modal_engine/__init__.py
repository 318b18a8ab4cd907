"""Modal, keyboard-driven text editing engine with syntax highlighting."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "errors",
    "keymaps",
    "modes",
    "motion",
    "runtime",
    "session",
    "storage",
    "syntax",
]

__version__ = "0.1.0"
