"""Translation of SQLAlchemy errors into repository errors.

Uniqueness violations are recognised by the driver's error code:
SQLite extended codes 2067 (SQLITE_CONSTRAINT_UNIQUE) and 1555
(SQLITE_CONSTRAINT_PRIMARYKEY), PostgreSQL SQLSTATE 23505.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tenant_identity.domain.errors import DuplicateRecordError, RepositoryError

SQLITE_UNIQUE_CODES = frozenset({2067, 1555})
POSTGRES_UNIQUE_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError is a uniqueness-constraint violation.

    Args:
        exc: IntegrityError raised by SQLAlchemy.

    Returns:
        bool: True for unique/primary-key violations, False for anything
            else (foreign key, not-null, check constraints).
    """
    orig = exc.orig
    sqlite_code = getattr(orig, "sqlite_errorcode", None)
    if sqlite_code is not None:
        return sqlite_code in SQLITE_UNIQUE_CODES
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == POSTGRES_UNIQUE_SQLSTATE
    return "UNIQUE constraint failed" in str(orig)


def translate_error(exc: SQLAlchemyError, operation: str) -> RepositoryError:
    """Map a SQLAlchemy error to the matching repository error.

    Args:
        exc: Error raised during a repository operation.
        operation: Name of the operation, e.g. "permissions.save".

    Returns:
        RepositoryError: DuplicateRecordError for uniqueness violations,
            RepositoryError otherwise.
    """
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        return DuplicateRecordError(str(exc.orig), operation=operation)
    return RepositoryError(str(exc), operation=operation)
