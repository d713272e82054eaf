"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from tenant_identity.core.errors import DomainError, ValidationError, NotFoundError
"""

from tenant_identity.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from tenant_identity.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
    "StorageError",
]
