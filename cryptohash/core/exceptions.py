"""
Custom exception hierarchy for cryptohash.

Provides typed exceptions so that callers can tell an unreadable source
from a misuse of the engine or a bad argument.
"""

from __future__ import annotations


class CryptoHashException(Exception):
    """
    Base exception for all cryptohash errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, algorithm names, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class CryptoHashConfigError(CryptoHashException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(CryptoHashConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Source Errors
# =============================================================================


class SourceReadError(CryptoHashException, OSError):
    """
    A digest source could not be read.

    The whole operation is aborted; no partial digest is produced.
    Callers that want to retry transient I/O errors do so themselves.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
        self.file_path = file_path


# =============================================================================
# Engine Errors
# =============================================================================


class EngineStateError(CryptoHashException, RuntimeError):
    """
    Operation not valid in the engine's current state.

    Raised when feeding data to an engine that was already finalized
    or closed, or when finalizing an engine that was closed first.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        state: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if state:
            ctx["state"] = state
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class CryptoHashValidationError(CryptoHashException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers may catch either.
    """

    pass


class InvalidArgumentError(CryptoHashValidationError):
    """
    Invalid function parameter.

    Raised for non-positive chunk sizes, out-of-range update lengths
    and unsupported source types.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: object | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class UnknownAlgorithmError(CryptoHashValidationError):
    """Requested digest algorithm is not one of the supported algorithms."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)
