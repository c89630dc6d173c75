"""
In-memory resource cache.

Holds two mappings keyed by the normalised resource identifier:
- content: the file bytes as of the last store
- digest: the SHA-256 of exactly those bytes

store() is the only mutator. It hashes first and then writes both
mappings, so an entry is never visible in one mapping without the other.
"""

from __future__ import annotations

import os
from typing import Iterator

from gemfs.cache.base import ResourceCacheProtocol
from gemfs.hashing import Hasher
from gemfs.logging import get_logger
from gemfs.types import Digest, ResourceId, to_key

logger = get_logger(__name__)


class ResourceCache(ResourceCacheProtocol):
    """Dual-keyed cache of resource content and content digests.

    Cached bytes objects are immutable and handed out by reference,
    so reads never copy. Not internally synchronised.
    """

    def __init__(self, hasher: Hasher | None = None) -> None:
        """Initialize cache.

        Args:
            hasher: Hasher used to digest stored content. Defaults to a
                1024-byte chunked SHA-256 hasher.
        """
        self.hasher = hasher or Hasher()
        self._content: dict[str, bytes] = {}
        self._digest: dict[str, Digest] = {}

    def store(self, identifier: ResourceId, content: bytes) -> Digest:
        """Store content and its digest, overwriting any prior entry.

        Args:
            identifier: Resource identifier used as key.
            content: Raw bytes. Converted to immutable bytes if needed.

        Returns:
            The digest stored alongside the content.
        """
        key = to_key(identifier)
        if not isinstance(content, bytes):
            content = bytes(content)

        digest = self.hasher.digest(content)
        self._digest[key] = digest
        self._content[key] = content

        logger.debug("Stored resource", resource=str(key), sha256=digest.hex(), size=len(content))
        return digest

    def has(self, identifier: ResourceId) -> bool:
        return to_key(identifier) in self._content

    def has_content(self, identifier: ResourceId) -> bool:
        return to_key(identifier) in self._content

    def has_digest(self, identifier: ResourceId) -> bool:
        return to_key(identifier) in self._digest

    def get_content(self, identifier: ResourceId) -> bytes | None:
        return self._content.get(to_key(identifier))

    def get_digest(self, identifier: ResourceId) -> Digest | None:
        return self._digest.get(to_key(identifier))

    def get_view(self, identifier: ResourceId) -> memoryview | None:
        """Get a read-only memoryview over cached content."""
        content = self.get_content(identifier)
        if content is None:
            return None
        return memoryview(content)

    def keys(self) -> list[str]:
        """List cached identifiers in insertion order."""
        return list(self._content)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, (str, os.PathLike)):
            return False
        return self.has(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._content))

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"ResourceCache(entries={len(self)})"
