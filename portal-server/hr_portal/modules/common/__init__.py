"""Shared abstractions used across domain modules."""

from .exceptions import (
    AuthenticationError,
    AuthenticationRequiredError,
    ConflictError,
    DanglingReferenceError,
    NotFoundError,
    PermissionDeniedError,
    PortalError,
    StorageError,
    ValidationError,
)
from .repository import AggregateRepository
from .validation import require_fields, require_password

__all__ = [
    "AggregateRepository",
    "AuthenticationError",
    "AuthenticationRequiredError",
    "ConflictError",
    "DanglingReferenceError",
    "NotFoundError",
    "PermissionDeniedError",
    "PortalError",
    "StorageError",
    "ValidationError",
    "require_fields",
    "require_password",
]
