"""
Diagnostic logging for cryptohash.

The engine and adapters report algorithm, chunk size and byte counts at
debug level and unreadable sources at warning level. Output goes to
stderr and/or a rotating file under ~/.cryptohash, both off by default.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".cryptohash" / "cryptohash.log"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _to_level(level: str) -> int:
    """Map a config level name to a logging level; unknown names mean warning."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


class CryptoHashLogger(ILogger):
    """ILogger backed by a named stdlib logger that does not propagate."""

    MAX_FILE_SIZE = 5 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        name: str = "cryptohash",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: Logger name
            level: Handler threshold (debug, info, warning, error)
            console_enabled: Write to stderr
            file_enabled: Write to a rotating log file
            log_file: Log file location, DEFAULT_LOG_FILE if omitted
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers.clear()
        self._logger.propagate = False
        self._handlers: list[logging.Handler] = []

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr), level)
        if file_enabled:
            path = log_file or DEFAULT_LOG_FILE
            path.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT),
                level,
            )

    @classmethod
    def from_config(cls, config: LoggingConfig, log_file: Path | None = None) -> "CryptoHashLogger":
        """Build the logger described by the [logging] config section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=log_file,
        )

    def _attach(self, handler: logging.Handler, level: str) -> None:
        handler.setLevel(_to_level(level))
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Change the threshold of every attached handler."""
        for handler in self._handlers:
            handler.setLevel(_to_level(level))

    def close(self) -> None:
        """Detach and close all handlers."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()


class NullLogger(ILogger):
    """Discards everything; used until the host application bootstraps."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
