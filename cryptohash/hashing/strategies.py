"""
Hash algorithm strategy implementations.

Each strategy wraps one hashlib primitive behind the same
create/update/finalize contract, so the engine can pick a strategy once
and never branch on the algorithm again.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

from .algorithms import DigestAlgorithm


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: The DigestAlgorithm member they implement
    - create_state(): Factory for a fresh hash state
    """

    @property
    @abstractmethod
    def algorithm(self) -> DigestAlgorithm:
        """Return the algorithm this strategy implements."""
        pass

    @abstractmethod
    def create_state(self) -> Any:
        """Create a new, empty hash state."""
        pass

    def update(self, state: Any, data: bytes | memoryview) -> None:
        """Feed data into the hash state. Default implementation works for hashlib."""
        state.update(data)

    def finalize(self, state: Any) -> bytes:
        """Derive the raw digest from the hash state. Default implementation works for hashlib."""
        return state.digest()


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.MD5

    def create_state(self) -> Any:
        return hashlib.md5()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA1

    def create_state(self) -> Any:
        return hashlib.sha1()


class SHA224Strategy(HashStrategy):
    """SHA-224 hashing strategy - truncated SHA-256."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA224

    def create_state(self) -> Any:
        return hashlib.sha224()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA256

    def create_state(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA384

    def create_state(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA512

    def create_state(self) -> Any:
        return hashlib.sha512()
