"""Plain-text file persistence for buffers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from modal_engine.errors import FileWriteError
from modal_engine.runtime import telemetry

logger = telemetry.get_logger("modal_engine.storage")


class Storage(Protocol):
    """Read/write contract the editing session relies on."""

    def load(self, path: Optional[str]) -> str:
        ...

    def save(self, path: Optional[str], text: str) -> None:
        ...


class FileStorage:
    """Reads and writes UTF-8 files on the local filesystem."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, path: Optional[str]) -> str:
        """Return the file's text; any read failure yields an empty buffer."""

        if not path:
            return ""
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("read failed for %s: %s", path, exc)
            return ""

    def save(self, path: Optional[str], text: str) -> None:
        if not path:
            raise FileWriteError("No file name for this buffer", path=path)
        with telemetry.span(
            "storage::save", component="storage", metadata={"path": path}
        ):
            try:
                Path(path).write_text(text, encoding=self.encoding)
            except OSError as exc:
                raise FileWriteError(f"Cannot write {path}: {exc}", path=path) from exc
        logger.info("wrote %d characters to %s", len(text), path)


__all__ = ["Storage", "FileStorage"]
