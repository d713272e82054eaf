"""Domain-level exceptions.

Parse errors are raised by value object constructors and converted to
ValidationError results at the service boundary. Repository errors are
raised by storage adapters and converted to StorageError/ConflictError.
"""

from tenant_identity.domain.errors.parse_error import (
    InvalidIdentifierError,
    InvalidResourceIdError,
    InvalidResourceKindError,
    InvalidTargetError,
    MalformedPermissionStringError,
    MissingDelimiterError,
    ParseError,
    UnknownVerbError,
)
from tenant_identity.domain.errors.repository_error import (
    DuplicateRecordError,
    RepositoryError,
)

__all__ = [
    "DuplicateRecordError",
    "InvalidIdentifierError",
    "InvalidResourceIdError",
    "InvalidResourceKindError",
    "InvalidTargetError",
    "MalformedPermissionStringError",
    "MissingDelimiterError",
    "ParseError",
    "RepositoryError",
    "UnknownVerbError",
]
