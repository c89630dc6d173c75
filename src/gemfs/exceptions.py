"""
Custom exception hierarchy for the resource loader.

All exceptions inherit from GemFSError, which provides optional context
for structured error handling and logging. Every failure a loader
operation can produce is raised as one of these, never as a process abort.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class GemFSError(Exception):
    """Base exception for all resource loader errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(GemFSError):
    """Raised when configuration is invalid.

    Examples:
        - Non-positive hashing chunk size
        - Unreadable settings values
    """

    pass


class ResourceNotFoundError(GemFSError):
    """Raised when a resource does not exist on disk or is not a regular file.

    Raised both when fetching and when checking synchronisation.
    """

    def __init__(self, identifier: Any, path: Path) -> None:
        super().__init__(
            "Resource not found at path",
            {"identifier": str(identifier), "path": str(path)},
        )
        self.identifier = identifier
        self.path = path


class NotCachedError(GemFSError):
    """Raised when a sync check is requested for a resource never fetched."""

    def __init__(self, identifier: Any) -> None:
        super().__init__(
            "Resource not found in cache, cannot check for synchronicity",
            {"identifier": str(identifier)},
        )
        self.identifier = identifier


class ResourceIOError(GemFSError):
    """Raised when reading resource bytes fails.

    Context should include:
        - identifier: The resource identifier, if known
        - path: The absolute path being read, if known
        - error: The underlying OS error text

    The original OSError is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        identifier: Any = None,
        path: Path | None = None,
        error: BaseException | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if identifier is not None:
            context["identifier"] = str(identifier)
        if path is not None:
            context["path"] = str(path)
        if error is not None:
            context["error"] = str(error)
        super().__init__(message, context)
        self.identifier = identifier
        self.path = path
        self.error = error
