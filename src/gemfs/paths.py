"""
Root-relative path mapping.

Identifiers are joined onto the root with directory-join semantics only.
There is no existence check and no containment check: identifiers with
".." segments may point outside the root, and an absolute identifier
replaces the root entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

from gemfs.types import ResourceId


class RootPathMapper:
    """Maps identifiers onto a fixed root directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        """Initialize mapper.

        Args:
            root: Base directory. Made absolute once; never resolved.
        """
        self._root = Path(root).absolute()

    @property
    def root(self) -> Path:
        """The absolute root directory."""
        return self._root

    def resolve(self, identifier: ResourceId) -> Path:
        """Join identifier onto the root.

        Args:
            identifier: Root-relative identifier.

        Returns:
            Absolute path, not checked for existence.
        """
        return self._root / os.fspath(identifier)

    def map(self, identifier: ResourceId) -> Path:
        """Alias of resolve()."""
        return self.resolve(identifier)

    def __repr__(self) -> str:
        return f"RootPathMapper(root={str(self._root)!r})"
