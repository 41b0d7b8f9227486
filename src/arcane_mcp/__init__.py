"""arcane_mcp package exports."""

from .client import (
    ArcaneAPIError,
    ArcaneClient,
    ArcaneClientError,
    ArcaneModelValidationError,
    ArcaneParseError,
)
from .resolve import (
    AmbiguousResolutionError,
    MissingIdentifierError,
    NotFoundResolutionError,
    ResolutionError,
    resolve_container_id,
    resolve_environment_id,
    resolve_stack_id,
)

__all__ = [
    # Client
    "ArcaneClient",
    # Exceptions
    "ArcaneClientError",
    "ArcaneAPIError",
    "ArcaneParseError",
    "ArcaneModelValidationError",
    "ResolutionError",
    "MissingIdentifierError",
    "NotFoundResolutionError",
    "AmbiguousResolutionError",
    # Resolvers
    "resolve_environment_id",
    "resolve_stack_id",
    "resolve_container_id",
]
