"""
Pytest configuration and fixtures for gemfs tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from gemfs.config import Settings, clear_settings_cache


class CountingFileSystem:
    """In-memory FileSystemPort that records every call."""

    def __init__(self, files: dict[Path, bytes] | None = None) -> None:
        self.files: dict[Path, bytes] = dict(files or {})
        self.directories: set[Path] = set()
        self.read_errors: dict[Path, OSError] = {}
        self.calls: list[tuple[str, Path]] = []

    @property
    def read_count(self) -> int:
        return sum(1 for name, _ in self.calls if name == "read_all_bytes")

    def exists(self, path: Path) -> bool:
        self.calls.append(("exists", path))
        return path in self.files or path in self.directories

    def is_regular_file(self, path: Path) -> bool:
        self.calls.append(("is_regular_file", path))
        return path in self.files

    def read_all_bytes(self, path: Path) -> bytes:
        self.calls.append(("read_all_bytes", path))
        if path in self.read_errors:
            raise self.read_errors[path]
        return self.files[path]


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """Provide a root directory with a few resources on disk."""
    root = tmp_path / "assets"
    (root / "models").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"ABC")
    (root / "empty.bin").write_bytes(b"")
    (root / "models" / "chest.obj").write_bytes(b"v 0 0 0\nv 1 0 0\nf 1 2\n")
    return root


@pytest.fixture
def counting_fs() -> CountingFileSystem:
    """Provide an empty counting filesystem."""
    return CountingFileSystem()


@pytest.fixture
def mock_env_vars(temp_dir: Path) -> Generator[dict[str, str], None, None]:
    """Provide mock GEMFS_* environment variables for testing."""
    env_vars = {
        "GEMFS_ROOT": str(temp_dir),
        "GEMFS_CHUNK_SIZE": "64",
        "GEMFS_LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture
def mock_settings(mock_env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Provide a Settings instance with mock configuration."""
    from gemfs.config import get_settings

    clear_settings_cache()
    yield get_settings()
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Automatically reset settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
