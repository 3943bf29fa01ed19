"""Services built on the digest engine: source adapters and logging."""

from .checksum import (
    DefaultChecksumService,
    checksum,
    checksum_bytes,
    checksum_file,
    checksum_text,
    open_source,
)
from .logging import CryptoHashLogger, NullLogger

__all__ = [
    "CryptoHashLogger",
    "DefaultChecksumService",
    "NullLogger",
    "checksum",
    "checksum_bytes",
    "checksum_file",
    "checksum_text",
    "open_source",
]
