"""
SHA-256 hashing for cached resource content.

Streams input through hashlib in fixed-size chunks. A failing read from
the underlying stream is raised as ResourceIOError so callers can recover.
"""

from __future__ import annotations

import hashlib
import io
from typing import BinaryIO

from gemfs.exceptions import ConfigurationError, ResourceIOError
from gemfs.types import Digest

DEFAULT_CHUNK_SIZE = 1024


class Hasher:
    """Chunked SHA-256 digester."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize hasher.

        Args:
            chunk_size: Number of bytes fed to the digest per read.

        Raises:
            ConfigurationError: If chunk_size is not positive.
        """
        if chunk_size < 1:
            raise ConfigurationError(
                "Hash chunk size must be positive", {"chunk_size": chunk_size}
            )
        self.chunk_size = chunk_size

    def digest(self, data: bytes | bytearray | memoryview | BinaryIO) -> Digest:
        """Compute the SHA-256 digest of bytes or a binary stream.

        Args:
            data: Raw bytes, or a readable binary stream positioned at the
                start of the content to hash.

        Returns:
            32-byte digest.

        Raises:
            ResourceIOError: If reading from the stream fails.
        """
        reader: BinaryIO
        if isinstance(data, (bytes, bytearray, memoryview)):
            reader = io.BytesIO(data)
        else:
            reader = data

        sha = hashlib.sha256()
        while True:
            try:
                chunk = reader.read(self.chunk_size)
            except OSError as e:
                raise ResourceIOError("Failed to read data while hashing", error=e) from e
            if not chunk:
                break
            sha.update(chunk)
        return sha.digest()

    def hexdigest(self, data: bytes | bytearray | memoryview | BinaryIO) -> str:
        """Hex-encoded form of digest()."""
        return self.digest(data).hex()

    def __repr__(self) -> str:
        return f"Hasher(chunk_size={self.chunk_size})"


def sha256_digest(data: bytes) -> Digest:
    """Digest bytes with a default-sized Hasher."""
    return Hasher().digest(data)
