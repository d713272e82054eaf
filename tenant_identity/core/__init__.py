"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Error codes shared by every layer

The core module has NO dependencies on other application layers.
"""

from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from tenant_identity.core.result import Failure, Result, Success

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "StorageError",
    "Success",
    "ValidationError",
]
