"""
Checksum services: buffer, text and file sources.

Every source ends up as a bytes-like buffer that is fed to a
DigestEngine in sequential slices of at most ``chunk_size`` bytes,
finalized once, and returned as lowercase hex.
"""

from __future__ import annotations

import functools
import mmap
import os
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..core.di import get_logger
from ..core.exceptions import InvalidArgumentError, SourceReadError
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..hashing.algorithms import DigestAlgorithm
from ..hashing.engine import DigestEngine, byte_view
from ..hashing.registry import HashAlgorithmRegistry

BytesLike = bytes | bytearray | memoryview


def _validate_chunk_size(chunk_size: Any) -> int:
    """Return chunk_size if it is a positive int, raise otherwise."""
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise InvalidArgumentError(
            "Chunk size must be a positive integer",
            argument="chunk_size",
            value=chunk_size,
        )
    return chunk_size


def _feed_chunks(data: Any, chunk_size: int, engines: list[DigestEngine]) -> int:
    """
    Feed data to every engine in slices of at most chunk_size bytes.

    Slices are zero-copy views and are released before returning, so a
    memory-mapped source can be closed afterwards.

    Returns:
        Number of bytes fed

    Raises:
        InvalidArgumentError: If data is not a contiguous bytes-like object
    """
    with byte_view(data) as view:
        total = view.nbytes
        remaining = total
        offset = 0
        while remaining > 0:
            size = min(remaining, chunk_size)
            with view[offset : offset + size] as chunk:
                for engine in engines:
                    engine.update(chunk)
            offset += size
            remaining -= size
    return total


def _checksum_buffer(
    data: Any,
    algorithm: DigestAlgorithm | str,
    chunk_size: int,
    registry: HashAlgorithmRegistry | None,
) -> str:
    with DigestEngine(algorithm, registry=registry) as engine:
        total = _feed_chunks(data, chunk_size, [engine])
        engine.finalize()
        get_logger().debug(
            "Computed %s over %d bytes in %d-byte chunks",
            engine.algorithm.value,
            total,
            chunk_size,
        )
        return engine.hexdigest()  # type: ignore[return-value]


@contextmanager
def open_source(path: str | os.PathLike[str]) -> Iterator[Any]:
    """
    Load a file's content for hashing.

    Non-empty regular files are memory-mapped read-only; anything else
    (empty files, pipes, character devices) is read fully into memory.
    Meant for local or LAN files: there is no resumption and no progress.

    Yields:
        A bytes-like object holding the whole file

    Raises:
        SourceReadError: If the file cannot be opened, inspected or read
        InvalidArgumentError: If path is not a str or path-like object
    """
    try:
        file_path = os.fspath(path)
    except TypeError as e:
        raise InvalidArgumentError(
            "File source must be a str or os.PathLike",
            argument="path",
            value=type(path).__name__,
            cause=e,
        ) from e

    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise _read_error(file_path, e) from e

    with f:
        mapped: mmap.mmap | None = None
        try:
            info = os.fstat(f.fileno())
            if stat.S_ISREG(info.st_mode) and info.st_size > 0:
                mapped = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
                content: Any = mapped
            else:
                content = f.read()
        except OSError as e:
            raise _read_error(file_path, e) from e

        if mapped is None:
            yield content
            return
        with mapped:
            yield mapped


def _read_error(file_path: str, error: OSError) -> SourceReadError:
    get_logger().warning("Cannot read %s: %s", file_path, error)
    return SourceReadError(
        f"Cannot read file: {error.strerror or error}",
        file_path=file_path,
        context={"errno": error.errno} if error.errno is not None else None,
        cause=error,
    )


# -------------------------------------------------------------------------
# Source adapters
# -------------------------------------------------------------------------


def checksum_bytes(
    data: BytesLike,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    *,
    registry: HashAlgorithmRegistry | None = None,
) -> str:
    """
    Compute the hex digest of an in-memory buffer.

    Args:
        data: Any bytes-like object; an empty buffer is valid
        algorithm: DigestAlgorithm member or name
        chunk_size: Maximum bytes fed to the engine per update
        registry: Strategy registry (defaults to the built-in strategies)

    Returns:
        Lowercase hex digest

    Raises:
        InvalidArgumentError: If chunk_size is not a positive integer
        UnknownAlgorithmError: If the algorithm is not supported
    """
    chunk_size = _validate_chunk_size(chunk_size)
    return _checksum_buffer(data, algorithm, chunk_size, registry)


def checksum_text(
    text: str,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
    *,
    registry: HashAlgorithmRegistry | None = None,
) -> str | None:
    """
    Compute the hex digest of a string's encoded bytes.

    Args:
        text: String to hash
        algorithm: DigestAlgorithm member or name
        chunk_size: Maximum bytes fed to the engine per update
        encoding: Codec used to turn the string into bytes
        registry: Strategy registry (defaults to the built-in strategies)

    Returns:
        Lowercase hex digest, or None if the string cannot be encoded
        (e.g. lone surrogates under UTF-8)

    Raises:
        InvalidArgumentError: If text is not a str, the codec is unknown,
            or chunk_size is not a positive integer
    """
    chunk_size = _validate_chunk_size(chunk_size)
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "Text source must be a str", argument="text", value=type(text).__name__
        )
    algorithm = DigestAlgorithm.parse(algorithm)

    try:
        data = text.encode(encoding)
    except UnicodeEncodeError as e:
        get_logger().debug("Text is not encodable as %s: %s", encoding, e.reason)
        return None
    except LookupError as e:
        raise InvalidArgumentError(
            f"Unknown text encoding: {encoding}", argument="encoding", value=encoding, cause=e
        ) from e

    return _checksum_buffer(data, algorithm, chunk_size, registry)


def checksum_file(
    path: str | os.PathLike[str],
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    *,
    registry: HashAlgorithmRegistry | None = None,
) -> str:
    """
    Compute the hex digest of a local file's content.

    Args:
        path: File path
        algorithm: DigestAlgorithm member or name
        chunk_size: Maximum bytes fed to the engine per update
        registry: Strategy registry (defaults to the built-in strategies)

    Returns:
        Lowercase hex digest

    Raises:
        SourceReadError: If the file is missing or unreadable
        InvalidArgumentError: If chunk_size is not a positive integer
    """
    chunk_size = _validate_chunk_size(chunk_size)
    algorithm = DigestAlgorithm.parse(algorithm)

    with open_source(path) as content:
        return _checksum_buffer(content, algorithm, chunk_size, registry)


@functools.singledispatch
def checksum(
    source: Any,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str | None:
    """
    Compute the hex digest of a buffer, a string or a file.

    bytes-like sources (anything supporting the buffer protocol, such as
    mmap or array.array) go to checksum_bytes, str to checksum_text and
    os.PathLike to checksum_file. A plain str is always text; wrap file
    names in pathlib.Path.
    """
    try:
        memoryview(source).release()
    except TypeError as e:
        raise InvalidArgumentError(
            f"Unsupported checksum source: {type(source).__name__}",
            argument="source",
            value=type(source).__name__,
            cause=e,
        ) from e
    return checksum_bytes(source, algorithm, chunk_size)


@checksum.register(bytes)
@checksum.register(bytearray)
@checksum.register(memoryview)
@checksum.register(mmap.mmap)
def _checksum_bytes_source(
    source: BytesLike,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    return checksum_bytes(source, algorithm, chunk_size)


@checksum.register(str)
def _checksum_text_source(
    source: str,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str | None:
    return checksum_text(source, algorithm, chunk_size)


@checksum.register(os.PathLike)
def _checksum_file_source(
    source: os.PathLike,
    algorithm: DigestAlgorithm | str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    return checksum_file(source, algorithm, chunk_size)


# -------------------------------------------------------------------------
# Service
# -------------------------------------------------------------------------


class DefaultChecksumService:
    """
    Default implementation of the checksum service.

    Uses the configured digest algorithm and chunk size whenever a call
    does not name its own.
    """

    def __init__(
        self,
        algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        registry: HashAlgorithmRegistry | None = None,
    ):
        """
        Initialize checksum service.

        Args:
            algorithm: Default algorithm for calls that pass none
            chunk_size: Default chunk size for calls that pass none
            registry: Hash algorithm registry (defaults to the built-in strategies)
        """
        self.algorithm = DigestAlgorithm.parse(algorithm)
        self.chunk_size = _validate_chunk_size(chunk_size)
        self._registry = registry

    @classmethod
    def from_settings(cls, settings: Any, registry: HashAlgorithmRegistry | None = None):
        """Build a service from CryptoHashSettings' [digest] section."""
        return cls(
            algorithm=settings.digest.algorithm,
            chunk_size=settings.digest.chunk_size,
            registry=registry,
        )

    def checksum_bytes(
        self,
        data: BytesLike,
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str:
        """Compute the digest of an in-memory buffer."""
        return checksum_bytes(
            data,
            self.algorithm if algorithm is None else algorithm,
            self.chunk_size if chunk_size is None else chunk_size,
            registry=self._registry,
        )

    def checksum_text(
        self,
        text: str,
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str | None:
        """Compute the digest of a string, or None if it cannot be encoded."""
        return checksum_text(
            text,
            self.algorithm if algorithm is None else algorithm,
            self.chunk_size if chunk_size is None else chunk_size,
            registry=self._registry,
        )

    def checksum_file(
        self,
        path: str | os.PathLike[str],
        algorithm: DigestAlgorithm | str | None = None,
        chunk_size: int | None = None,
    ) -> str:
        """Compute the digest of a local file's content."""
        return checksum_file(
            path,
            self.algorithm if algorithm is None else algorithm,
            self.chunk_size if chunk_size is None else chunk_size,
            registry=self._registry,
        )

    def compute_hashes(
        self,
        path: str | os.PathLike[str],
        algorithms: list[DigestAlgorithm | str] | None = None,
    ) -> dict[str, str]:
        """
        Compute multiple digests for a file in a single pass.

        Args:
            path: File path
            algorithms: Algorithms to compute. None means the service's algorithm;
                an empty list returns {} without opening the file.

        Returns:
            Dict of {algorithm name: hex digest}, in the order requested

        Raises:
            SourceReadError: If the file is missing or unreadable
        """
        if algorithms is None:
            algorithms = [self.algorithm]
        resolved = [DigestAlgorithm.parse(a) for a in algorithms]
        # Duplicates collapse onto a single engine
        unique = list(dict.fromkeys(resolved))
        if not unique:
            return {}

        engines = [DigestEngine(algo, registry=self._registry) for algo in unique]
        try:
            with open_source(path) as content:
                _feed_chunks(content, self.chunk_size, engines)
            return {engine.algorithm.value: engine.finalize().hex() for engine in engines}
        finally:
            for engine in engines:
                engine.close()
