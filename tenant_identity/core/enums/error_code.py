"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authorization errors (UNAUTHORIZED, PERMISSION_DENIED)
- Storage errors (*_FAILED), named after the failing sub-operation
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_INPUT = "invalid_input"
    INVALID_EMAIL = "invalid_email"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_PERMISSION = "invalid_permission"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    PROFILE_NOT_FOUND = "profile_not_found"
    TENANT_NOT_FOUND = "tenant_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    TENANT_ALREADY_EXISTS = "tenant_already_exists"

    # Authorization errors
    UNAUTHORIZED = "unauthorized"
    PERMISSION_DENIED = "permission_denied"

    # Storage errors
    ACCESS_CHECK_FAILED = "access_check_failed"
    PERMISSION_CREATE_FAILED = "permission_create_failed"
    PERMISSION_DELETE_FAILED = "permission_delete_failed"
    STORAGE_FAILED = "storage_failed"
