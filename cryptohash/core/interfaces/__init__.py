"""
Protocol definitions for cryptohash's service interfaces.

These protocols define the contracts that implementations must follow,
enabling dependency inversion between the library and its host application.
"""

from .logger import ILogger
from .services import ChecksumService

__all__ = [
    "ChecksumService",
    "ILogger",
]
