"""
Application bootstrap for cryptohash.

Registers settings, the logger and the checksum service in the DI
container. Library calls work without it; bootstrapping only makes
them log and lets hosts resolve a configured ChecksumService.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.services import ChecksumService

_initialized = False


def bootstrap(
    settings=None,
    config_path: Path | None = None,
    start_dir: str | Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap cryptohash.

    Args:
        settings: Preloaded CryptoHashSettings; loaded from disk/env if omitted
        config_path: Explicit config file (ignored when settings is given)
        start_dir: Directory to search for a config file from

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        from .settings import load_settings

        settings = load_settings(config_path=config_path, start_dir=start_dir)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings) -> None:
    """Register core application services."""
    from ..services.checksum import DefaultChecksumService
    from ..services.logging import CryptoHashLogger
    from .settings import CryptoHashSettings

    container.register_instance(CryptoHashSettings, settings)
    container.register_factory(
        ILogger,  # type: ignore[type-abstract]
        lambda: CryptoHashLogger.from_config(settings.logging),
    )
    container.register_factory(
        ChecksumService,  # type: ignore[type-abstract]
        lambda: DefaultChecksumService.from_settings(settings),
    )


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
