"""
Streaming digest engine.

A DigestEngine owns exactly one hash computation: it creates the
algorithm's hash state on construction, accepts any number of update()
calls, and finalizes that state at most once. Later finalize() calls
return the cached digest without touching the consumed state.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

from ..core.di import get_logger
from ..core.exceptions import EngineStateError, InvalidArgumentError
from .algorithms import DigestAlgorithm
from .registry import HashAlgorithmRegistry, default_registry


def byte_view(data: Any) -> memoryview:
    """
    Return a flat unsigned-byte view over a bytes-like object.

    The caller owns the returned view and must release it.

    Raises:
        InvalidArgumentError: If data does not support the buffer protocol
            or is not C-contiguous
    """
    try:
        view = memoryview(data)
    except TypeError as e:
        raise InvalidArgumentError(
            "Data must be a bytes-like object",
            argument="data",
            value=type(data).__name__,
            cause=e,
        ) from e

    with view:
        if not view.c_contiguous:
            raise InvalidArgumentError(
                "Data must be a contiguous buffer", argument="data", value=type(data).__name__
            )
        try:
            return view.cast("B")
        except ValueError as e:
            # Non-native item formats such as "<i" cannot be cast
            raise InvalidArgumentError(
                f"Unsupported buffer format: {view.format}",
                argument="data",
                value=type(data).__name__,
                cause=e,
            ) from e


class DigestEngine:
    """
    Incremental digest computation over one algorithm.

    Feeding A then B produces the same digest as feeding A+B in a single
    update, which is what lets callers hash large inputs in bounded chunks.

    Example:
        with DigestEngine("sha256") as engine:
            for chunk in chunks:
                engine.update(chunk)
            engine.finalize()
            print(engine.hexdigest())

    Not thread-safe: give each concurrent computation its own engine.
    """

    def __init__(
        self,
        algorithm: DigestAlgorithm | str,
        registry: HashAlgorithmRegistry | None = None,
    ) -> None:
        """
        Create the hash state for the given algorithm.

        Args:
            algorithm: DigestAlgorithm member or name
            registry: Strategy registry (defaults to the built-in strategies)

        Raises:
            UnknownAlgorithmError: If the algorithm is not supported
        """
        self.algorithm = DigestAlgorithm.parse(algorithm)
        self._strategy = (registry or default_registry()).get(self.algorithm)
        self._state: Any = self._strategy.create_state()
        self._digest: bytes | None = None
        self._closed = False
        self._bytes_processed = 0
        self._logger = get_logger()

    @property
    def digest(self) -> bytes | None:
        """The raw digest, or None before finalize()."""
        return self._digest

    @property
    def is_finalized(self) -> bool:
        return self._digest is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def bytes_processed(self) -> int:
        """Total number of bytes fed through update()."""
        return self._bytes_processed

    def update(self, data: Any, length: int | None = None) -> None:
        """
        Feed bytes into the hash state.

        Args:
            data: Any bytes-like object (bytes, bytearray, memoryview, mmap)
            length: Number of leading bytes of data to feed; all of it if omitted

        Raises:
            EngineStateError: If the engine was already finalized or closed
            InvalidArgumentError: If data is not a contiguous bytes-like object,
                or length is negative or exceeds the data size
        """
        if self._closed:
            raise EngineStateError(
                "Cannot update a closed digest engine",
                algorithm=self.algorithm.value,
                state="closed",
            )
        if self._digest is not None:
            raise EngineStateError(
                "Cannot update a finalized digest engine",
                algorithm=self.algorithm.value,
                state="finalized",
            )

        with byte_view(data) as view:
            size = view.nbytes
            if length is None:
                length = size
            elif isinstance(length, bool) or not isinstance(length, int):
                raise InvalidArgumentError(
                    "Update length must be an integer", argument="length", value=length
                )
            elif not 0 <= length <= size:
                raise InvalidArgumentError(
                    f"Update length must be between 0 and {size}",
                    argument="length",
                    value=length,
                )
            if length:
                with view[:length] as head:
                    self._strategy.update(self._state, head)
        self._bytes_processed += length

    def finalize(self) -> bytes:
        """
        Derive the digest, running the underlying finalize at most once.

        Returns:
            Digest of exactly algorithm.digest_length bytes

        Raises:
            EngineStateError: If the engine was closed before producing a digest
        """
        if self._digest is not None:
            return self._digest
        if self._closed:
            raise EngineStateError(
                "Cannot finalize a closed digest engine",
                algorithm=self.algorithm.value,
                state="closed",
            )

        digest = bytes(self._strategy.finalize(self._state))
        if len(digest) != self.algorithm.digest_length:
            raise EngineStateError(
                f"Strategy produced {len(digest)} bytes, expected {self.algorithm.digest_length}",
                algorithm=self.algorithm.value,
                state="finalizing",
            )

        # The state is consumed; only the digest is kept.
        self._state = None
        self._digest = digest
        self._logger.debug(
            "Finalized %s digest over %d bytes", self.algorithm.value, self._bytes_processed
        )
        return digest

    def hexdigest(self) -> str | None:
        """Lowercase hex encoding of the digest, or None before finalize()."""
        if self._digest is None:
            return None
        return self._digest.hex()

    def close(self) -> None:
        """Release the hash state. Safe to call more than once."""
        self._state = None
        self._closed = True

    def __enter__(self) -> DigestEngine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            state = "closed"
        elif self._digest is not None:
            state = "finalized"
        else:
            state = "open"
        return f"<DigestEngine {self.algorithm.value} {state} bytes={self._bytes_processed}>"
