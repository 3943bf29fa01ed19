"""
Supported digest algorithms.

The set is closed: adding an algorithm means adding a member here and a
strategy in ``strategies.py``.
"""

from __future__ import annotations

from enum import Enum

from ..core.exceptions import UnknownAlgorithmError


class DigestAlgorithm(str, Enum):
    """Digest algorithm identifiers, valued by their hashlib name."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_length(self) -> int:
        """Size of this algorithm's digest in bytes."""
        return _DIGEST_LENGTHS[self]

    @property
    def hex_length(self) -> int:
        """Size of this algorithm's hex-encoded digest in characters."""
        return 2 * _DIGEST_LENGTHS[self]

    @classmethod
    def parse(cls, value: DigestAlgorithm | str) -> DigestAlgorithm:
        """
        Resolve a member or a loosely spelled algorithm name.

        Accepts 'sha256', 'SHA-256' and 'sha_256' alike.

        Raises:
            UnknownAlgorithmError: If the name matches no supported algorithm
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownAlgorithmError(
                f"Digest algorithm must be a name, got {type(value).__name__}",
                algorithm=repr(value),
            )
        normalized = value.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError as e:
            raise UnknownAlgorithmError(
                f"Unknown digest algorithm: {value}",
                algorithm=value,
                context={"supported": [a.value for a in cls]},
                cause=e,
            ) from e

    def __str__(self) -> str:
        return self.value


_DIGEST_LENGTHS: dict[DigestAlgorithm, int] = {
    DigestAlgorithm.MD5: 16,
    DigestAlgorithm.SHA1: 20,
    DigestAlgorithm.SHA224: 28,
    DigestAlgorithm.SHA256: 32,
    DigestAlgorithm.SHA384: 48,
    DigestAlgorithm.SHA512: 64,
}
