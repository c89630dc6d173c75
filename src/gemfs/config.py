"""
Configuration management using pydantic-settings.

Loads configuration from GEMFS_-prefixed environment variables and .env
files. Validates values and provides typed access to settings.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loader settings loaded from environment variables.

    Optional:
        GEMFS_ROOT: Root directory resources are resolved against
        GEMFS_CHUNK_SIZE: Bytes fed to SHA-256 per read while hashing
        GEMFS_LOG_LEVEL: Logging level
        GEMFS_LOG_FILE: JSON-lines log file path
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ROOT: Path = Field(default=Path("."), description="Resource root directory")

    CHUNK_SIZE: int = Field(
        default=1024, ge=1, le=64 * 1024 * 1024, description="Hashing chunk size in bytes"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    LOG_FILE: Path | None = Field(default=None, description="JSON-lines log file")

    @property
    def root(self) -> Path:
        """Absolute root directory."""
        return self.ROOT.absolute()

    @property
    def chunk_size(self) -> int:
        """Get hashing chunk size (lowercase alias)."""
        return self.CHUNK_SIZE

    def redacted_display(self) -> dict[str, str | int | None]:
        """Return settings for display."""
        return {
            "ROOT": str(self.root),
            "CHUNK_SIZE": self.CHUNK_SIZE,
            "LOG_LEVEL": self.LOG_LEVEL,
            "LOG_FILE": str(self.LOG_FILE) if self.LOG_FILE else None,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ValidationError: If settings are invalid.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
