import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from lazy_di.application.context import ResolutionContext
from lazy_di.application.resolution_cache import ResolutionCache
from lazy_di.domain import (
    RESERVED_NAMES,
    CircularDependencyError,
    DependencyMissingError,
    DuplicateDependencyError,
    Factory,
    ForbiddenNameError,
    IContainer,
    IResolutionCache,
    Registration,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DIContainer(IContainer):
    """Lazy dependency container.

    Accumulates named factories and resolves each of them into a singleton on
    first access. Factories receive a read-only ``ResolutionContext`` through
    which they read the dependencies they need. Every registered name can also
    be read as an attribute of the container.

    Attributes:
        _registry: Resolver table mapping dependency names to their registration.
        _cache: Component holding the already resolved values.
        _resolving: Names whose factories are currently running, outermost first.
        _context: The view handed to factories.

    Example:
        >>> container = (
        ...     DIContainer()
        ...     .add("config", lambda ctx: DatabaseConfig.from_env())
        ...     .add("db", lambda ctx: DatabaseConnection(ctx.config))
        ... )
        >>> container.db is container.get("db")
        True
    """

    def __init__(
        self,
        registry: Optional[Dict[str, Registration]] = None,
        resolved: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the container, empty unless a starting state is given.

        Args:
            registry: Optional resolver table to start from. It is copied.
            resolved: Optional resolved values to start from. They are copied and
                must only name dependencies present in ``registry``.
        """
        self._registry: Dict[str, Registration] = dict(registry or {})
        self._cache: IResolutionCache = ResolutionCache(
            {name: value for name, value in (resolved or {}).items() if name in self._registry}
        )
        self._resolving: List[str] = []
        self._context = ResolutionContext(self)

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or name in RESERVED_NAMES:
            raise ForbiddenNameError(name)

    def add(self, name: str, factory: Factory) -> "DIContainer":
        """Register a new dependency factory.

        Adding never overwrites: use ``update`` to replace an existing factory.

        Args:
            name: The dependency name.
            factory: Function receiving the resolution context and returning the value.

        Returns:
            This container, so calls can be chained.

        Raises:
            ForbiddenNameError: If the name is empty or a container operation.
            DuplicateDependencyError: If the name is already registered.

        Example:
            >>> container.add("a", lambda ctx: 1).add("b", lambda ctx: ctx.a + 1)
        """
        self._check_name(name)
        if self.has(name):
            raise DuplicateDependencyError(name)

        self._registry[name] = Registration(name=name, factory=factory)
        logger.debug("Registered dependency '%s'", name)
        return self

    def update(self, name: str, factory: Factory) -> "DIContainer":
        """Replace the factory of an existing dependency.

        The value already resolved for ``name``, if any, is discarded so the next
        access runs the new factory. Values of other dependencies are kept.

        Args:
            name: The dependency name.
            factory: The replacement factory.

        Returns:
            This container, so calls can be chained.

        Raises:
            ForbiddenNameError: If the name is empty or a container operation.
            DependencyMissingError: If the name is not registered, use ``add`` first.
        """
        self._check_name(name)
        if not self.has(name):
            raise DependencyMissingError(name)

        self._registry[name] = Registration(name=name, factory=factory)
        self._cache.invalidate(name)
        logger.debug("Updated dependency '%s'", name)
        return self

    def has(self, name: str) -> bool:
        """Check whether a factory is registered under ``name``. Never resolves."""
        return name in self._registry

    def names(self) -> List[str]:
        """Registered dependency names in registration order."""
        return list(self._registry)

    def get(self, name: str) -> Any:
        """Resolve and return the dependency registered under ``name``.

        The factory runs on first access only; later calls return the very same
        value until the dependency is replaced.

        Args:
            name: The dependency name.

        Returns:
            The resolved value.

        Raises:
            DependencyMissingError: If no factory is registered under ``name``.
            CircularDependencyError: If the factory transitively requires ``name``.
            ResolutionError: If the factory fails.
            IncorrectInvocationError: If the factory calls a container operation
                through its context.
        """
        registration = self._registry.get(name)
        if registration is None:
            raise DependencyMissingError(name)

        if name in self._resolving:
            cycle = self._resolving[self._resolving.index(name) :] + [name]
            raise CircularDependencyError(cycle)

        self._resolving.append(name)
        try:
            return self._cache.get_or_create(name, lambda: registration.factory(self._context))
        finally:
            self._resolving.pop()

    def extend(self, extension: Callable[["DIContainer"], T]) -> T:
        """Apply a registration function to this container.

        Useful to split registrations across modules:

            >>> def add_validators(container):
            ...     return container.add("validator", lambda ctx: Validator(ctx.repo))
            >>> container = DIContainer().add("repo", make_repo).extend(add_validators)

        Args:
            extension: Function receiving this container.

        Returns:
            Whatever ``extension`` returns, usually the same container.
        """
        return extension(self)

    def merge(self, other: IContainer) -> "DIContainer":
        """Fold another container into this one, in place.

        Registrations of ``other`` override registrations of the same name here,
        bypassing the ``add``/``update`` guards. Already resolved values of both
        sides survive, the ones from ``other`` winning on collision. A value this
        container resolved for a name that ``other`` overrides is dropped.

        Args:
            other: The container to merge in. It is left untouched.

        Returns:
            This container.
        """
        incoming = other.get_registry_copy()
        resolved = other.get_cache_copy()
        for name in incoming:
            self._cache.invalidate(name)

        self._registry.update(incoming)
        self._cache.absorb(resolved)
        logger.debug("Merged %d dependencies into container", len(incoming))
        return self

    def clone(self) -> "DIContainer":
        """Create an independent container with a copy of this one's state.

        The clone gets its own resolver table and its own cache. Registering a
        name on one container never affects the other. Values resolved before
        cloning are shared by reference.

        Returns:
            The new container.

        Example:
            >>> base = DIContainer().add("a", lambda ctx: "a")
            >>> context_a = base.clone().add("buzz", lambda ctx: Buzz("A"))
            >>> context_b = base.clone().add("buzz", lambda ctx: Buzz("B"))
        """
        logger.debug("Cloning container with %d dependencies", len(self._registry))
        return DIContainer(self.get_registry_copy(), self.get_cache_copy())

    def get_registry_copy(self) -> Dict[str, Registration]:
        """Get a copy of the resolver table.

        Returns:
            Copy of the current registrations.
        """
        return self._registry.copy()

    def get_cache_copy(self) -> Dict[str, Any]:
        """Get a copy of the resolved values.

        Returns:
            Copy of the name to value mapping.
        """
        return self._cache.snapshot()

    def __getattr__(self, name: str) -> Any:
        # Only reached when regular attribute lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        if not self.has(name):
            raise AttributeError(f"{type(self).__name__!r} object has no dependency {name!r}")
        return self.get(name)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | {name for name in self._registry if not name.startswith("_")})

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        resolved = [name for name in self._registry if self._cache.contains(name)]
        return f"{type(self).__name__}(names={self.names()!r}, resolved={resolved!r})"
