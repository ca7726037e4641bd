from typing import Any

from lazy_di.domain import RESERVED_NAMES, IContainer, IncorrectInvocationError


class ResolutionContext:
    """Read-only view of a container handed to every factory.

    Dependencies are read by attribute (``ctx.db``) or by item (``ctx["db"]``);
    both resolve through the owning container, so values are memoized there.
    Container operations are not reachable through the view.

    Reading an unregistered name raises ``DependencyMissingError``, which is not
    an ``AttributeError``: ``hasattr(ctx, "x")`` and ``getattr(ctx, "x", default)``
    propagate it. Test optional dependencies with ``"x" in ctx`` instead.

    Example:
        >>> container.add("repo", lambda ctx: UserRepository(ctx.db))
        >>> container.add("cache", lambda ctx: ctx.redis if "redis" in ctx else MemoryCache())
    """

    __slots__ = ("_container",)

    def __init__(self, container: IContainer) -> None:
        object.__setattr__(self, "_container", container)

    def _lookup(self, name: str) -> Any:
        if name in RESERVED_NAMES:
            raise IncorrectInvocationError(name)
        return self._container.get(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return self._lookup(name)

    def __getitem__(self, name: str) -> Any:
        return self._lookup(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._container.has(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise IncorrectInvocationError(f"set {name}")

    def __delattr__(self, name: str) -> None:
        raise IncorrectInvocationError(f"delete {name}")

    def __setitem__(self, name: str, value: Any) -> None:
        raise IncorrectInvocationError(f"set {name}")

    def __delitem__(self, name: str) -> None:
        raise IncorrectInvocationError(f"delete {name}")

    def __repr__(self) -> str:
        return f"ResolutionContext(names={self._container.names()!r})"
