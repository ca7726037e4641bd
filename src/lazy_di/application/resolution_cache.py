import logging
from typing import Any, Callable, Dict, Mapping, Optional

from lazy_di.domain import DIException, IResolutionCache, ResolutionError

logger = logging.getLogger(__name__)


class ResolutionCache(IResolutionCache):
    """Stores the values produced by factories, one per dependency name.

    A name counts as resolved as soon as it has an entry, whatever the value
    is (``None``, ``0`` and ``""`` are cached like any other value).

    Attributes:
        _values: Mapping of dependency names to their resolved values.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        """Initialize the cache.

        Args:
            values: Optional already resolved values to start from. They are copied.
        """
        self._values: Dict[str, Any] = dict(values or {})

    def get_or_create(self, name: str, factory: Callable[[], Any]) -> Any:
        """Get the cached value or create, cache and return a new one.

        Args:
            name: The dependency name.
            factory: Function to create the value on a cache miss.

        Returns:
            The cached value for ``name``.

        Raises:
            ResolutionError: If the factory fails with a non-DI exception.

        Example:
            >>> cache = ResolutionCache()
            >>> cache.get_or_create("answer", lambda: 42)
            42
        """
        if name in self._values:
            return self._values[name]

        try:
            value = factory()
        except DIException:
            raise
        except Exception as e:
            raise ResolutionError(name, f"Failed to create instance: {e}") from e

        logger.debug("Resolved dependency '%s'", name)
        self._values[name] = value
        return value

    def contains(self, name: str) -> bool:
        return name in self._values

    def invalidate(self, name: str) -> None:
        """Drop the cached value so the next resolution calls the factory again."""
        self._values.pop(name, None)

    def absorb(self, values: Mapping[str, Any]) -> None:
        """Union another set of resolved values into this cache.

        Args:
            values: Resolved values to take over. They win on name collision.
        """
        self._values.update(values)

    def snapshot(self) -> Dict[str, Any]:
        """Get a shallow copy of the cached values.

        Returns:
            Copy of the name to value mapping. The values themselves are shared.
        """
        return self._values.copy()
