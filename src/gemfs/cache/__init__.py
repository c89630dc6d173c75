"""
Cache package for in-memory resource content.

This package provides:
- Cache interface (base.py): abstract store/has/get operations
- Resource cache (memory.py): paired content and digest mappings
"""

from gemfs.cache.base import ResourceCacheProtocol
from gemfs.cache.memory import ResourceCache

__all__ = ["ResourceCache", "ResourceCacheProtocol"]
