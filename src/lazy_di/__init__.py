"""
lazy-di: Lazy dependency container resolving named factories into singletons.

Public API exports for the lazy_di package.
"""

import logging

# Application exports
from lazy_di.application.container import DIContainer
from lazy_di.application.context import ResolutionContext

# Domain exports
from lazy_di.domain.enums import RESERVED_NAMES, ContainerOperation
from lazy_di.domain.exceptions import (
    CircularDependencyError,
    DependencyMissingError,
    DIException,
    DuplicateDependencyError,
    ForbiddenNameError,
    IncorrectInvocationError,
    ResolutionError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Container
    "DIContainer",
    "ResolutionContext",
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
]
