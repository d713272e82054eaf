"""Common error classes used across all layers.

Error Types:
- ValidationError: Malformed identifier, email, target, action or permission string
- NotFoundError: Lookup miss (not a system fault)
- ConflictError: Uniqueness violation that is not swallowed as idempotent
- AuthorizationError: Authorization pre-check failed
- StorageError: Any other adapter or transaction failure

Usage:
    from tenant_identity.core.errors import ValidationError
    from tenant_identity.core.enums import ErrorCode
    from tenant_identity.core.result import Failure

    return Failure(ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email"
    ))
"""

from dataclasses import dataclass

from tenant_identity.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User, Profile, Tenant).
        resource_id: ID (or lookup key) of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, auth_id, etc.).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode.UNAUTHORIZED for grant/revoke,
            ErrorCode.PERMISSION_DENIED for guarded deletes.
        message: Human-readable message.
        required_permission: Canonical string of the permission that was required.
        details: Additional context.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(DomainError):
    """Storage adapter or transaction failure.

    The code names the failing sub-operation (ACCESS_CHECK_FAILED,
    PERMISSION_CREATE_FAILED, PERMISSION_DELETE_FAILED, STORAGE_FAILED) so
    callers can tell "couldn't check" from "checked and denied".

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        operation: Name of the storage operation that failed.
        details: Additional context.
    """

    operation: str
