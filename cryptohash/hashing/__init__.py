"""
Digest algorithms, their strategies, and the streaming digest engine.

Each supported algorithm has exactly one strategy; the engine selects it
once at construction and drives it through create/update/finalize.
"""

from .algorithms import DigestAlgorithm
from .engine import DigestEngine
from .registry import HashAlgorithmRegistry, default_registry
from .strategies import (
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA224Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)

__all__ = [
    "DigestAlgorithm",
    "DigestEngine",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA224Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "default_registry",
]
