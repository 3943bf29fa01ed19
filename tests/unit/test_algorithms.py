"""
Unit tests for the DigestAlgorithm enumeration.

Tests digest lengths and name parsing.
"""

import hashlib

import pytest

from cryptohash.core.exceptions import UnknownAlgorithmError
from cryptohash.hashing.algorithms import DigestAlgorithm


class TestDigestLength:
    """Tests for DigestAlgorithm.digest_length."""

    @pytest.mark.parametrize(
        ("algorithm", "expected"),
        [
            (DigestAlgorithm.MD5, 16),
            (DigestAlgorithm.SHA1, 20),
            (DigestAlgorithm.SHA224, 28),
            (DigestAlgorithm.SHA256, 32),
            (DigestAlgorithm.SHA384, 48),
            (DigestAlgorithm.SHA512, 64),
        ],
    )
    def test_fixed_lengths(self, algorithm, expected):
        """Each algorithm reports its published digest size."""
        assert algorithm.digest_length == expected
        assert algorithm.hex_length == 2 * expected

    @pytest.mark.parametrize("algorithm", list(DigestAlgorithm))
    def test_matches_hashlib(self, algorithm):
        """Lengths agree with the hashlib primitive of the same name."""
        assert algorithm.digest_length == hashlib.new(algorithm.value).digest_size

    def test_closed_set(self):
        """Exactly six algorithms are supported."""
        assert len(DigestAlgorithm) == 6


class TestParse:
    """Tests for DigestAlgorithm.parse."""

    def test_member_passes_through(self):
        """A member is returned unchanged."""
        assert DigestAlgorithm.parse(DigestAlgorithm.SHA384) is DigestAlgorithm.SHA384

    @pytest.mark.parametrize("name", ["sha256", "SHA256", "SHA-256", "sha_256", " sha256 "])
    def test_loose_spellings(self, name):
        """Case, dashes, underscores and surrounding spaces are ignored."""
        assert DigestAlgorithm.parse(name) is DigestAlgorithm.SHA256

    def test_sha1_dash(self):
        """SHA-1 resolves to SHA1."""
        assert DigestAlgorithm.parse("SHA-1") is DigestAlgorithm.SHA1

    def test_unknown_name_raises(self):
        """Unsupported names raise UnknownAlgorithmError."""
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            DigestAlgorithm.parse("blake3")
        assert exc_info.value.context["algorithm"] == "blake3"

    def test_unknown_name_is_value_error(self):
        """UnknownAlgorithmError can be caught as ValueError."""
        with pytest.raises(ValueError):
            DigestAlgorithm.parse("crc32")

    def test_non_string_raises(self):
        """Non-string values are rejected."""
        with pytest.raises(UnknownAlgorithmError):
            DigestAlgorithm.parse(256)  # type: ignore[arg-type]

    def test_str_is_value(self):
        """str() of a member is its hashlib name."""
        assert str(DigestAlgorithm.SHA512) == "sha512"
