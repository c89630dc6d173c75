"""
Base classes for caching.

ResourceCacheProtocol is the abstract interface every cache backend
implements. Backends support:
- store: write content and its digest together under one key
- has / get_content / get_digest lookups
There is no eviction, update-in-place, or removal operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gemfs.types import Digest, ResourceId


class ResourceCacheProtocol(ABC):
    """Abstract interface for resource cache implementations."""

    @abstractmethod
    def store(self, identifier: ResourceId, content: bytes) -> Digest:
        """Store content and its digest under identifier, overwriting."""
        ...

    @abstractmethod
    def has(self, identifier: ResourceId) -> bool:
        """Check if identifier has a cached entry."""
        ...

    @abstractmethod
    def get_content(self, identifier: ResourceId) -> bytes | None:
        """Get cached content, or None if never stored."""
        ...

    @abstractmethod
    def get_digest(self, identifier: ResourceId) -> Digest | None:
        """Get cached digest, or None if never stored."""
        ...
