"""
Unit tests for the hash algorithm registry and strategies.
"""

import hashlib

import pytest

from cryptohash.core.exceptions import InvalidArgumentError, UnknownAlgorithmError
from cryptohash.hashing.algorithms import DigestAlgorithm
from cryptohash.hashing.registry import HashAlgorithmRegistry, default_registry
from cryptohash.hashing.strategies import HashStrategy, SHA256Strategy


class TestHashAlgorithmRegistry:
    """Tests for HashAlgorithmRegistry."""

    def test_defaults_cover_every_algorithm(self):
        """All six algorithms have a strategy out of the box."""
        registry = HashAlgorithmRegistry()
        assert set(registry.available_algorithms) == set(DigestAlgorithm)

    @pytest.mark.parametrize("algorithm", list(DigestAlgorithm))
    def test_strategy_matches_algorithm(self, algorithm):
        """Each strategy is registered under its own algorithm."""
        strategy = HashAlgorithmRegistry().get(algorithm)
        assert strategy.algorithm is algorithm

    def test_get_by_name(self):
        """Strategies can be looked up by loosely spelled name."""
        strategy = HashAlgorithmRegistry().get("SHA-224")
        assert strategy.algorithm is DigestAlgorithm.SHA224

    def test_get_unknown_raises(self):
        """Unknown names raise UnknownAlgorithmError."""
        with pytest.raises(UnknownAlgorithmError):
            HashAlgorithmRegistry().get("whirlpool")

    def test_empty_registry_raises(self):
        """A known algorithm without a strategy raises UnknownAlgorithmError."""
        registry = HashAlgorithmRegistry(register_defaults=False)
        with pytest.raises(UnknownAlgorithmError):
            registry.get(DigestAlgorithm.MD5)

    def test_contains(self):
        """Membership accepts members and names, and rejects unknown names."""
        registry = HashAlgorithmRegistry()
        assert DigestAlgorithm.SHA1 in registry
        assert "sha512" in registry
        assert "blake3" not in registry

    def test_register_replaces_implementation(self):
        """Registering a strategy swaps the implementation for its algorithm."""

        class CustomSHA256(SHA256Strategy):
            pass

        registry = HashAlgorithmRegistry()
        custom = CustomSHA256()
        registry.register(custom)
        assert registry.get("sha256") is custom
        assert len(registry.available_algorithms) == 6

    def test_register_rejects_new_algorithms(self):
        """Strategies for algorithms outside the closed set are refused."""

        class Blake3Strategy(HashStrategy):
            @property
            def algorithm(self):
                return "blake3"

            def create_state(self):
                return None

        with pytest.raises(InvalidArgumentError):
            HashAlgorithmRegistry().register(Blake3Strategy())  # type: ignore[arg-type]

    def test_compute_hash(self):
        """compute_hash returns the hex digest of the data."""
        registry = HashAlgorithmRegistry()
        assert registry.compute_hash("md5", b"abc") == "900150983cd24fb0d6963f7d28e17f72"

    def test_default_registry_is_shared(self):
        """default_registry() returns the same instance each time."""
        assert default_registry() is default_registry()


class TestStrategies:
    """Tests for the hashlib-backed strategies."""

    @pytest.mark.parametrize("algorithm", list(DigestAlgorithm))
    def test_update_and_finalize(self, algorithm):
        """A strategy's create/update/finalize matches hashlib."""
        strategy = HashAlgorithmRegistry().get(algorithm)
        state = strategy.create_state()
        strategy.update(state, b"hello ")
        strategy.update(state, b"world")
        assert strategy.finalize(state) == hashlib.new(algorithm.value, b"hello world").digest()

    def test_states_are_independent(self):
        """Each create_state() call returns a fresh state."""
        strategy = HashAlgorithmRegistry().get("sha1")
        first = strategy.create_state()
        second = strategy.create_state()
        strategy.update(first, b"data")
        assert strategy.finalize(second) == hashlib.sha1().digest()
