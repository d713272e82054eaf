"""Core enums package."""

from tenant_identity.core.enums.environment import Environment
from tenant_identity.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
