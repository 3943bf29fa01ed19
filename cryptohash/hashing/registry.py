"""
Hash algorithm registry.

Maps every DigestAlgorithm member to the strategy that implements it.
The algorithm set is closed; registering only swaps the implementation
behind an existing member.
"""

from __future__ import annotations

from ..core.exceptions import InvalidArgumentError, UnknownAlgorithmError
from .algorithms import DigestAlgorithm
from .strategies import (
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA224Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()

        strategy = registry.get("sha256")
        digest = registry.compute_hash(DigestAlgorithm.MD5, b"payload")
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register the built-in hashlib strategies
        """
        self._strategies: dict[DigestAlgorithm, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register(MD5Strategy())
        self.register(SHA1Strategy())
        self.register(SHA224Strategy())
        self.register(SHA256Strategy())
        self.register(SHA384Strategy())
        self.register(SHA512Strategy())

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy for one of the supported algorithms.

        Args:
            strategy: HashStrategy implementation

        Raises:
            InvalidArgumentError: If the strategy's algorithm is not a DigestAlgorithm
        """
        algorithm = strategy.algorithm
        if not isinstance(algorithm, DigestAlgorithm):
            raise InvalidArgumentError(
                "Strategies can only be registered for supported digest algorithms",
                argument="strategy",
                value=type(strategy).__name__,
            )
        self._strategies[algorithm] = strategy

    def get(self, algorithm: DigestAlgorithm | str) -> HashStrategy:
        """
        Get strategy by algorithm.

        Args:
            algorithm: DigestAlgorithm member or name (e.g., 'sha256', 'SHA-1')

        Returns:
            HashStrategy for the algorithm

        Raises:
            UnknownAlgorithmError: If the algorithm is unknown or has no strategy
        """
        resolved = DigestAlgorithm.parse(algorithm)
        strategy = self._strategies.get(resolved)
        if strategy is None:
            raise UnknownAlgorithmError(
                f"No strategy registered for digest algorithm: {resolved}",
                algorithm=resolved.value,
            )
        return strategy

    def compute_hash(self, algorithm: DigestAlgorithm | str, data: bytes) -> str:
        """
        Compute hash of data using the specified algorithm.

        Args:
            algorithm: Algorithm member or name
            data: Data to hash

        Returns:
            Hex-encoded hash digest
        """
        from .engine import DigestEngine

        with DigestEngine(algorithm, registry=self) as engine:
            engine.update(data)
            engine.finalize()
            return engine.hexdigest()  # type: ignore[return-value]

    @property
    def available_algorithms(self) -> list[DigestAlgorithm]:
        """List registered algorithms."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: object) -> bool:
        """Check if algorithm is registered."""
        try:
            resolved = DigestAlgorithm.parse(algorithm)  # type: ignore[arg-type]
        except UnknownAlgorithmError:
            return False
        return resolved in self._strategies


_default_registry: HashAlgorithmRegistry | None = None


def default_registry() -> HashAlgorithmRegistry:
    """Return the shared registry of built-in strategies."""
    global _default_registry
    if _default_registry is None:
        _default_registry = HashAlgorithmRegistry()
    return _default_registry
