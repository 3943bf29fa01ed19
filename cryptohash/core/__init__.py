"""
Core infrastructure for cryptohash.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Protocol definitions for service interfaces
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    CryptoHashConfigError,
    CryptoHashException,
    CryptoHashValidationError,
    EngineStateError,
    InvalidArgumentError,
    SourceReadError,
    UnknownAlgorithmError,
)

__all__ = [
    "ConfigFileError",
    "CryptoHashConfigError",
    "CryptoHashException",
    "CryptoHashValidationError",
    "EngineStateError",
    "InvalidArgumentError",
    "ServiceContainer",
    "SourceReadError",
    "UnknownAlgorithmError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
