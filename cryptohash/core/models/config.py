"""
Configuration models.

Provides Pydantic models for cryptohash configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from ...hashing.algorithms import DigestAlgorithm
from .base import CryptoHashBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_CHUNK_SIZE = 4096


class DigestConfig(CryptoHashBaseModel):
    """Digest defaults section."""

    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, v: Any) -> DigestAlgorithm:
        """Accept loose spellings such as 'SHA-256'."""
        return DigestAlgorithm.parse(v)


class LoggingConfig(CryptoHashBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v
