"""gemfs - root-relative resource loading with an in-memory, hash-checked cache."""

from gemfs.cache import ResourceCache
from gemfs.exceptions import (
    ConfigurationError,
    GemFSError,
    NotCachedError,
    ResourceIOError,
    ResourceNotFoundError,
)
from gemfs.hashing import Hasher
from gemfs.loader import ResourceLoader
from gemfs.paths import RootPathMapper
from gemfs.types import SyncState

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GemFSError",
    "Hasher",
    "NotCachedError",
    "ResourceCache",
    "ResourceIOError",
    "ResourceLoader",
    "ResourceNotFoundError",
    "RootPathMapper",
    "SyncState",
    "__version__",
]
