"""
cryptohash - chunked MD5/SHA digests of buffers, strings and files.

Usage:
    from cryptohash import DigestAlgorithm, checksum_file

    checksum_file("model.bin", DigestAlgorithm.SHA256)
"""

from .core.exceptions import (
    CryptoHashException,
    EngineStateError,
    InvalidArgumentError,
    SourceReadError,
    UnknownAlgorithmError,
)
from .core.models.config import DEFAULT_CHUNK_SIZE
from .hashing import DigestAlgorithm, DigestEngine, HashAlgorithmRegistry
from .services.checksum import (
    DefaultChecksumService,
    checksum,
    checksum_bytes,
    checksum_file,
    checksum_text,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "CryptoHashException",
    "DefaultChecksumService",
    "DigestAlgorithm",
    "DigestEngine",
    "EngineStateError",
    "HashAlgorithmRegistry",
    "InvalidArgumentError",
    "SourceReadError",
    "UnknownAlgorithmError",
    "__version__",
    "checksum",
    "checksum_bytes",
    "checksum_file",
    "checksum_text",
]
