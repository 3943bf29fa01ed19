"""
Pydantic models for cryptohash configuration.
"""

from .base import CryptoHashBaseModel
from .config import (
    DEFAULT_CHUNK_SIZE,
    DigestConfig,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "CryptoHashBaseModel",
    "DigestConfig",
    "LoggingConfig",
]
