from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lazy_di.domain import IContainer


def create_fastapi_dependency(container: IContainer, name: str) -> Callable[[], Awaitable[Any]]:
    """Create a FastAPI Depends() callable that resolves from the DI container.

    The value is resolved lazily on the first request that needs it and the
    same instance is served afterwards. The returned callable is a coroutine
    function, so FastAPI runs it on the event loop rather than in its
    threadpool and two first requests cannot both run the factory.

    Args:
        container: The DI container to resolve dependencies from.
        name: The dependency name to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = DIContainer().add("users", lambda ctx: UserRepository(ctx.db))
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    async def dependency() -> Any:
        """Resolve the dependency from the container."""
        return container.get(name)

    return dependency


def create_request_dependency(name: str) -> Callable[[Request], Awaitable[Any]]:
    """Create a FastAPI dependency that resolves from the container attached to the request.

    Requires the ContainerMiddleware to be installed.

    Args:
        name: The dependency name to resolve.

    Returns:
        A callable that resolves from ``request.state.di_container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> get_settings = create_request_dependency("settings")
        >>>
        >>> @app.get("/settings")
        >>> async def read_settings(settings: Settings = Depends(get_settings)):
        ...     return settings.model_dump()
    """

    async def request_dependency(request: Request) -> Any:
        """Resolve from the request's container."""
        if not hasattr(request.state, "di_container"):
            raise RuntimeError(
                "Request does not have a DI container. Did you forget to add ContainerMiddleware?"
            )
        container: IContainer = request.state.di_container
        return container.get(name)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a DI container on every request.

    The container is accessible via `request.state.di_container`.

    Attributes:
        container: The DI container attached to requests.

    Example:
        >>> container = DIContainer().add("db", lambda ctx: DatabaseConnection())
        >>>
        >>> app = FastAPI()
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     db = request.state.di_container.db
        ...     return {"message": "Hello"}
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware with the application container.

        Args:
            app: The FastAPI/Starlette application.
            container: The DI container to attach to requests.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.di_container = self.container
        return await call_next(request)
