from typing import Any, Optional, Set

from lazy_di.application import DIContainer, ResolutionCache
from lazy_di.domain import Factory, IContainer


class TestContainer(DIContainer):
    """DI container for testing with dependency override capabilities.

    Starts as an independent copy of a parent container (registrations and
    already resolved values) and lets tests replace any dependency without the
    ``add``/``update`` distinction. The parent is never modified.

    This is useful for:
    - Mocking external services (databases, APIs, etc.)
    - Replacing implementations with test doubles
    - Isolating tests from shared state

    Attributes:
        _parent_container: The container the registrations were copied from.
        _overrides: Names registered through ``override`` or ``mock``, undone by ``reset_overrides``.

    Example:
        >>> container = (
        ...     DIContainer()
        ...     .add("email", lambda ctx: RealEmailService())
        ...     .add("users", lambda ctx: UserService(ctx.email))
        ... )
        >>>
        >>> def test_user_service():
        ...     with TestContainer(container) as test_container:
        ...         mock_email = MockEmailService()
        ...         test_container.mock("email", mock_email)
        ...
        ...         test_container.users.send_welcome_email(user)
        ...
        ...         assert mock_email.send_called
    """

    __test__ = False  # Tell pytest not to collect this class as a test

    def __init__(self, parent_container: Optional[IContainer] = None) -> None:
        """Initialize the test container.

        Args:
            parent_container: Optional parent container to copy the state from.
                            If None, creates an empty container.
        """
        if parent_container is not None:
            super().__init__(parent_container.get_registry_copy(), parent_container.get_cache_copy())
        else:
            super().__init__()
        self._parent_container = parent_container
        self._overrides: Set[str] = set()

    def override(self, name: str, factory: Factory) -> "TestContainer":
        """Register ``factory`` under ``name``, replacing any existing registration.

        Args:
            name: The dependency to override.
            factory: Factory receiving the resolution context.

        Returns:
            This container, so calls can be chained.

        Example:
            >>> test_container.override("cache", lambda ctx: InMemoryCache())
        """
        if self.has(name):
            self.update(name, factory)
        else:
            self.add(name, factory)
        self._overrides.add(name)
        return self

    def mock(self, name: str, instance: Any) -> "TestContainer":
        """Replace a dependency with a fixed instance.

        Args:
            name: The dependency to mock.
            instance: The value returned for ``name`` from now on.

        Returns:
            This container, so calls can be chained.

        Example:
            >>> mock_db = MockDatabase()
            >>> test_container.mock("db", mock_db)
            >>> assert test_container.repo.db is mock_db
        """
        return self.override(name, lambda ctx: instance)

    def reset_overrides(self) -> None:
        """Undo every override and forget values resolved since the copy.

        Overridden names get the parent's registration back, or are removed
        when the parent never had them. Dependencies added with ``add`` stay
        registered. Values resolved in this container may have been built from
        mocks, so the cache falls back to the parent's resolved values.

        Useful for cleaning up between test cases.
        """
        parent_registry = self._parent_container.get_registry_copy() if self._parent_container is not None else {}
        parent_cache = self._parent_container.get_cache_copy() if self._parent_container is not None else {}

        for name in self._overrides:
            if name in parent_registry:
                self._registry[name] = parent_registry[name]
            else:
                del self._registry[name]
        self._overrides.clear()

        self._cache = ResolutionCache(
            {name: value for name, value in parent_cache.items() if self._registry.get(name) is parent_registry[name]}
        )

    def __enter__(self) -> "TestContainer":
        """Context manager entry - returns self."""
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        """Context manager exit - automatically clean up overrides."""
        self.reset_overrides()
        return False


def create_mock_container(**instances: Any) -> TestContainer:
    """Create a test container with pre-configured mock instances.

    Args:
        **instances: Dependency names mapped to the instances to return.

    Returns:
        TestContainer with mocked dependencies.

    Example:
        >>> test_container = create_mock_container(db=MockDatabase(), cache=MockCache())
        >>> test_container.add("repo", lambda ctx: UserRepository(ctx.db, ctx.cache))
    """
    container = TestContainer()

    for name, instance in instances.items():
        container.mock(name, instance)

    return container
