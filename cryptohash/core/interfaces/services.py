"""
Service protocol definitions.

These protocols define the contracts for services that drive the
streaming digest engine over a concrete source.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...hashing.algorithms import DigestAlgorithm


@runtime_checkable
class ChecksumService(Protocol):
    """Service for computing hex digests of buffers, text and files."""

    def checksum_bytes(
        self,
        data: bytes | bytearray | memoryview,
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str:
        """Compute the digest of an in-memory buffer."""
        ...

    def checksum_text(
        self,
        text: str,
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str | None:
        """Compute the digest of a string, or None if it cannot be encoded."""
        ...

    def checksum_file(
        self,
        path: str | os.PathLike[str],
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str:
        """Compute the digest of a local file's content."""
        ...

    def compute_hashes(
        self,
        path: str | os.PathLike[str],
        algorithms: list[DigestAlgorithm | str] | None = None,
    ) -> dict[str, str]:
        """Compute several digests of one file in a single pass."""
        ...
