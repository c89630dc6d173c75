"""Filesystem port and local implementation used by the loader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemPort(Protocol):
    """Port for the three filesystem primitives the loader consumes."""

    def exists(self, path: Path) -> bool:
        """Check whether anything exists at path."""
        ...

    def is_regular_file(self, path: Path) -> bool:
        """Check whether path is a regular file."""
        ...

    def read_all_bytes(self, path: Path) -> bytes:
        """Read the whole file. Raises OSError on failure."""
        ...


class LocalFileSystem:
    """FileSystemPort backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_regular_file(self, path: Path) -> bool:
        return path.is_file()

    def read_all_bytes(self, path: Path) -> bytes:
        return path.read_bytes()
