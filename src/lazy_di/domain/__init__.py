"""
Domain layer - Core rules and models.

This layer contains the fundamental rules and models of the container.
It has no dependencies on other layers.
"""

from .enums import RESERVED_NAMES, ContainerOperation
from .exceptions import (
    CircularDependencyError,
    DependencyMissingError,
    DIException,
    DuplicateDependencyError,
    ForbiddenNameError,
    IncorrectInvocationError,
    ResolutionError,
)
from .interfaces import Factory, IContainer, IResolutionCache
from .models import Registration

__all__ = [
    # Enums
    "ContainerOperation",
    "RESERVED_NAMES",
    # Exceptions
    "DIException",
    "ForbiddenNameError",
    "DuplicateDependencyError",
    "DependencyMissingError",
    "IncorrectInvocationError",
    "CircularDependencyError",
    "ResolutionError",
    # Interfaces
    "Factory",
    "IContainer",
    "IResolutionCache",
    # Models
    "Registration",
]
