"""Exception types shared across the engine."""

from __future__ import annotations


class ModalEngineError(RuntimeError):
    """Base class for engine failures surfaced to callers."""


class InvalidPatternConfiguration(ModalEngineError, ValueError):
    """Raised when a classification or motion pattern fails to compile."""

    def __init__(self, message: str, *, rule: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule


class ThemeError(ModalEngineError, ValueError):
    """Raised when a colour theme is malformed."""


class FileWriteError(ModalEngineError):
    """Raised when the buffer cannot be written back to disk."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "ModalEngineError",
    "InvalidPatternConfiguration",
    "ThemeError",
    "FileWriteError",
]
