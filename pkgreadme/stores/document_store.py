"""Path-keyed text storage used by the update pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DocumentStore(Protocol):
    """Minimal text blob store keyed by filesystem path."""

    def is_file(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...


class FileSystemStore:
    """Reads and writes UTF-8 files on the local filesystem."""

    encoding = "utf-8"

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            return False

    # newline="" leaves line endings untouched in both directions.
    def read_text(self, path: Path) -> str:
        with path.open(encoding=self.encoding, newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        with path.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(content)


__all__ = ["DocumentStore", "FileSystemStore"]
