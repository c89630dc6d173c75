"""
ResourceLoader: path-relative resource access backed by an in-memory cache.

Two purposes:
- read, cache, and hand out file content regardless of where the root lives
- map root-relative identifiers to absolute paths for external usage

Each identifier is either uncached or cached. The first successful fetch
caches it; nothing ever uncaches it. read() serves cached identifiers
without touching the filesystem. fetch_and_cache() always goes to disk and
refreshes the entry. check_sync() compares the cached digest against the
current file and never modifies the cache.

Not internally synchronised. Callers sharing one loader across threads
must guard every call with a single lock.
"""

from __future__ import annotations

import hmac
import os
from pathlib import Path

from gemfs.cache import ResourceCache
from gemfs.config import Settings
from gemfs.exceptions import NotCachedError, ResourceIOError, ResourceNotFoundError
from gemfs.filesystem import FileSystemPort, LocalFileSystem
from gemfs.hashing import Hasher
from gemfs.logging import get_logger, log_context
from gemfs.paths import RootPathMapper
from gemfs.types import CacheStats, ResourceId, ResourceInfo, SyncState, to_key

logger = get_logger(__name__)


class ResourceLoader:
    """Loads resources under a fixed root and caches their content."""

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        filesystem: FileSystemPort | None = None,
        hasher: Hasher | None = None,
        cache: ResourceCache | None = None,
    ) -> None:
        """Initialize ResourceLoader.

        Args:
            root: Root directory identifiers are resolved against.
            filesystem: Filesystem primitives. Defaults to LocalFileSystem.
            hasher: Hasher for digests. Defaults to 1024-byte chunks.
            cache: Cache to own. A fresh ResourceCache sharing hasher if omitted.
        """
        self._mapper = RootPathMapper(root)
        self._fs: FileSystemPort = filesystem or LocalFileSystem()
        self._hasher = hasher or (cache.hasher if cache is not None else Hasher())
        self._cache = cache if cache is not None else ResourceCache(self._hasher)
        self._stats = CacheStats()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        filesystem: FileSystemPort | None = None,
    ) -> ResourceLoader:
        """Build a loader from Settings (root and hashing chunk size)."""
        return cls(
            settings.root,
            filesystem=filesystem,
            hasher=Hasher(settings.chunk_size),
        )

    @property
    def root(self) -> Path:
        """Absolute root directory. Fixed for the loader's lifetime."""
        return self._mapper.root

    @property
    def cache(self) -> ResourceCache:
        """The owned cache."""
        return self._cache

    @property
    def stats(self) -> CacheStats:
        """Hit/miss counters."""
        return self._stats

    def map(self, identifier: ResourceId) -> Path:
        """Map an identifier to its absolute path. No I/O.

        Args:
            identifier: Root-relative identifier; ".." is not contained.

        Returns:
            root joined with identifier.
        """
        return self._mapper.resolve(identifier)

    def is_cached(self, identifier: ResourceId) -> bool:
        """Check whether identifier has been fetched."""
        return self._cache.has(identifier)

    def _load(self, identifier: ResourceId, path: Path) -> bytes:
        """Read a regular file or raise a loader error."""
        if not (self._fs.exists(path) and self._fs.is_regular_file(path)):
            raise ResourceNotFoundError(identifier, path)
        try:
            return self._fs.read_all_bytes(path)
        except FileNotFoundError as e:
            raise ResourceNotFoundError(identifier, path) from e
        except OSError as e:
            logger.warning("Failed to read resource", path=str(path), error=str(e))
            raise ResourceIOError(
                "Failed to read resource", identifier=identifier, path=path, error=e
            ) from e

    def fetch_and_cache(self, identifier: ResourceId) -> bytes:
        """Read a resource from disk and (re)cache it.

        Always hits the filesystem. On success both content and digest are
        replaced together.

        Args:
            identifier: Root-relative identifier.

        Returns:
            The cached bytes.

        Raises:
            ResourceNotFoundError: Path is missing or not a regular file.
            ResourceIOError: The read failed.
        """
        key = to_key(identifier)
        path = self.map(key)

        with log_context(root=str(self.root), resource=str(key)):
            logger.debug("Fetching resource", path=str(path))
            content = bytes(self._load(key, path))
            self._cache.store(key, content)
            self._stats.fetches += 1

        return content

    def read(self, identifier: ResourceId) -> bytes:
        """Return resource content, fetching it only on a cache miss.

        Args:
            identifier: Root-relative identifier.

        Returns:
            Cached bytes. Valid until a later fetch overwrites the entry.

        Raises:
            ResourceNotFoundError: Uncached and missing on disk.
            ResourceIOError: Uncached and the read failed.
        """
        cached = self._cache.get_content(identifier)
        if cached is not None:
            self._stats.hits += 1
            return cached

        self._stats.misses += 1
        return self.fetch_and_cache(identifier)

    def read_file(self, identifier: ResourceId) -> bytes:
        """Alias of read()."""
        return self.read(identifier)

    def check_sync(self, identifier: ResourceId) -> SyncState:
        """Compare the cached digest with the file currently on disk.

        Read-only with respect to the cache, even on mismatch. Re-fetch
        with fetch_and_cache() to refresh.

        Args:
            identifier: Root-relative identifier previously fetched.

        Returns:
            SyncState.HASH_MATCH or SyncState.HASH_UNMATCH.

        Raises:
            NotCachedError: identifier was never fetched. No disk access.
            ResourceNotFoundError: File is gone or not a regular file.
            ResourceIOError: Reading or hashing the file failed.
        """
        key = to_key(identifier)
        cached_digest = self._cache.get_digest(key)
        if cached_digest is None:
            raise NotCachedError(key)

        path = self.map(key)
        with log_context(root=str(self.root), resource=str(key)):
            disk_digest = self._hasher.digest(self._load(key, path))
            self._stats.sync_checks += 1

            if hmac.compare_digest(disk_digest, cached_digest):
                state = SyncState.HASH_MATCH
            else:
                state = SyncState.HASH_UNMATCH

            logger.debug(
                "Checked resource sync",
                path=str(path),
                sha256=disk_digest.hex(),
                state=state.value,
            )
        return state

    def info(self, identifier: ResourceId) -> ResourceInfo:
        """Describe a cached resource.

        Raises:
            NotCachedError: identifier was never fetched.
        """
        key = to_key(identifier)
        content = self._cache.get_content(key)
        digest = self._cache.get_digest(key)
        if content is None or digest is None:
            raise NotCachedError(key)
        return ResourceInfo(identifier=key, path=self.map(key), size=len(content), digest=digest)

    def __repr__(self) -> str:
        return f"ResourceLoader Path: {str(self.root)!r}"

    def __str__(self) -> str:
        return f"ResourceLoader Path: {self.root}"
