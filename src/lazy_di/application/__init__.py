"""
Application layer - Registration and resolution.

This layer contains the container and the components it orchestrates.
It depends only on the Domain layer.
"""

from .container import DIContainer
from .context import ResolutionContext
from .resolution_cache import ResolutionCache

__all__ = [
    "DIContainer",
    "ResolutionContext",
    "ResolutionCache",
]
