"""
Core types for the resource loader.

This module defines the data structures shared across the package:
- ResourceId / to_key for normalising caller-supplied identifiers
- SyncState enum for cache/disk comparison results
- ResourceInfo frozen dataclass describing a cached resource
- CacheStats mutable dataclass for hit/miss bookkeeping
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Identifiers may be given as str or any path-like object.
ResourceId = Union[str, "os.PathLike[str]"]

# SHA-256 digest bytes.
Digest = bytes

DIGEST_SIZE = 32

_SEPARATOR_RUN = re.compile("[" + re.escape(os.sep + (os.altsep or "")) + "]+")


def to_key(identifier: ResourceId) -> str:
    """Normalise a resource identifier into a cache key.

    Runs of separators collapse to one "/". Nothing else changes: "." and
    ".." segments are kept, so "a.txt" and "./a.txt" are distinct keys.

    Args:
        identifier: Root-relative resource identifier.

    Returns:
        String used as the key in both cache mappings.
    """
    return _SEPARATOR_RUN.sub("/", os.fspath(identifier))


class SyncState(str, Enum):
    """Result of comparing a cached digest against the on-disk file."""

    HASH_MATCH = "hash_match"
    HASH_UNMATCH = "hash_unmatch"

    @property
    def in_sync(self) -> bool:
        """Whether the cached copy matches the disk copy."""
        return self is SyncState.HASH_MATCH


@dataclass(frozen=True)
class ResourceInfo:
    """Description of a cached resource."""

    identifier: str
    path: Path
    size: int
    digest: Digest

    @property
    def hexdigest(self) -> str:
        """Hex-encoded SHA-256 digest."""
        return self.digest.hex()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "identifier": str(self.identifier),
            "path": str(self.path),
            "size": self.size,
            "sha256": self.hexdigest,
        }


@dataclass
class CacheStats:
    """Counters for loader activity. Bookkeeping only."""

    hits: int = 0
    misses: int = 0
    fetches: int = 0
    sync_checks: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return asdict(self)
