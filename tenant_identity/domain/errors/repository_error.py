"""Exceptions raised by repository adapters.

Adapters translate driver exceptions into these so the application layer
never depends on a specific database library.
"""


class RepositoryError(Exception):
    """A storage operation failed.

    Attributes:
        operation: Name of the failed operation (e.g. "permissions.save").
    """

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class DuplicateRecordError(RepositoryError):
    """Insert violated a uniqueness constraint."""
