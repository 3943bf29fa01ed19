"""
Shared pytest fixtures for cryptohash tests.

This module provides:
- reset_container: Clears the DI container and bootstrap flag around each test
- clean_env: Removes CRYPTOHASH_* variables so host settings don't leak in
- sample_bytes: A deterministic payload spanning several default-size chunks
- sample_file: The same payload written to a temporary file
"""

import os
from pathlib import Path

import pytest

from cryptohash.core.bootstrap import reset


@pytest.fixture(autouse=True)
def reset_container():
    """Run every test against a fresh, un-bootstrapped container."""
    reset()
    yield
    reset()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any CRYPTOHASH_* environment variables set by the host."""
    for name in list(os.environ):
        if name.startswith("CRYPTOHASH_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_bytes() -> bytes:
    """
    Deterministic payload of 10,000 bytes.

    Not a multiple of 4096, so the last default-size chunk is short.
    """
    return (bytes(range(256)) * 40)[:10_000]


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """Write sample_bytes to a temporary file and return its path."""
    path = tmp_path / "payload.bin"
    path.write_bytes(sample_bytes)
    return path
