from typing import List, Optional


class DIException(Exception):
    """Base exception for DI-related errors."""


class ForbiddenNameError(DIException):
    """Raised when a dependency name collides with a container operation.

    Attributes:
        name: The rejected dependency name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dependency resolver with name {name} is not allowed")


class DuplicateDependencyError(DIException):
    """Raised when `add` is called for a name that is already registered.

    Attributes:
        name: The dependency name that is already defined.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dependency resolver with name {name} is already defined, use update method instead")


class DependencyMissingError(DIException, LookupError):
    """Raised when a dependency is requested or updated but never registered.

    Attributes:
        name: The missing dependency name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dependency resolver with name {name} is not defined")


class IncorrectInvocationError(DIException):
    """Raised when a factory calls a container operation through its context.

    Attributes:
        operation: The operation that was reached through the context.
    """

    def __init__(self, operation: Optional[str] = None) -> None:
        self.operation = operation
        message = "Incorrect invocation of DIContainer"
        if operation:
            message += f": '{operation}' is not available inside a factory"
        super().__init__(message)


class CircularDependencyError(DIException):
    """Raised when a factory transitively requires its own dependency.

    Attributes:
        dependency_chain: Names involved in the cycle, first name repeated last.
    """

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        super().__init__(f"Circular dependency detected: {' -> '.join(dependency_chain)}")


class ResolutionError(DIException):
    """Raised when a factory fails while producing its value.

    Attributes:
        name: The dependency whose factory failed.
        reason: Optional description of the failure.
    """

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason
        message = f"Cannot resolve dependency: {name}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)
