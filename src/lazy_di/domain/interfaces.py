from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, TypeVar

from lazy_di.domain.models import Registration

T = TypeVar("T")

Factory = Callable[[Any], Any]


class IContainer(ABC):
    """Abstract interface for dependency container operations."""

    @abstractmethod
    def add(self, name: str, factory: Factory) -> "IContainer":
        """Register a new dependency factory.

        Args:
            name: The dependency name. Must not be registered yet.
            factory: Function receiving the resolution context.
        """

    @abstractmethod
    def update(self, name: str, factory: Factory) -> "IContainer":
        """Replace the factory of an already registered dependency.

        Args:
            name: The dependency name. Must already be registered.
            factory: The replacement factory.
        """

    @abstractmethod
    def get(self, name: str) -> Any:
        """Resolve and return the value registered under the given name.

        Args:
            name: The dependency name.
        """

    @abstractmethod
    def has(self, name: str) -> bool:
        """Check whether a factory is registered under the given name."""

    @abstractmethod
    def names(self) -> List[str]:
        """Return the registered dependency names."""

    @abstractmethod
    def extend(self, extension: Callable[["IContainer"], T]) -> T:
        """Apply a registration function to the container and return its result."""

    @abstractmethod
    def merge(self, other: "IContainer") -> "IContainer":
        """Fold another container's registrations and resolved values into this one."""

    @abstractmethod
    def clone(self) -> "IContainer":
        """Create an independent copy of the container."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[str, Registration]:
        """Get a copy of the current resolver table."""

    @abstractmethod
    def get_cache_copy(self) -> Dict[str, Any]:
        """Get a copy of the already resolved values."""


class IResolutionCache(ABC):
    """Abstract interface for the store of already resolved values."""

    @abstractmethod
    def get_or_create(self, name: str, factory: Callable[[], Any]) -> Any:
        """Return the cached value or create and cache a new one.

        Args:
            name: The dependency name.
            factory: A callable producing the value on a cache miss.
        """

    @abstractmethod
    def contains(self, name: str) -> bool:
        """Check whether a value is cached under the given name."""

    @abstractmethod
    def invalidate(self, name: str) -> None:
        """Drop the cached value for the given name, if any."""

    @abstractmethod
    def absorb(self, values: Mapping[str, Any]) -> None:
        """Union the given values into the cache, incoming values winning."""

    @abstractmethod
    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow copy of the cached values."""
