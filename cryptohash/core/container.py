"""
Service container for cryptohash.

A process-wide registry of dependency-injector providers keyed by
interface type. The library resolves its logger from here, and hosts
that call bootstrap() can resolve a configured ChecksumService.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Holds one provider per interface; the global instance is lazily created."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global container so the next lookup starts empty."""
        cls._instance = None

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Register an already built service."""
        self._providers[interface] = providers.Object(instance)

    def register_factory(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Register a service built on first resolve and shared afterwards."""
        self._providers[interface] = providers.Singleton(factory)

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Replace whatever is registered for interface (used by tests)."""
        self._providers[interface] = provider

    def __contains__(self, interface: type) -> bool:
        return interface in self._providers

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If nothing is registered for interface
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for {interface.__name__}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, or return None if nothing is registered."""
        provider = self._providers.get(interface)
        return None if provider is None else provider()


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
