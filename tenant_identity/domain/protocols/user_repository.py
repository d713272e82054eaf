"""UserRepository protocol (port).

Repositories take no part in transaction control: they run inside the
session owned by the unit of work that created them.
"""

from typing import Protocol

from tenant_identity.domain.entities import User
from tenant_identity.domain.value_objects import Identifier


class UserRepository(Protocol):
    """User repository protocol (port)."""

    async def find_by_id(self, user_id: Identifier) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateRecordError: If id or auth_id already exists.
            RepositoryError: On any other storage failure.
        """
        ...

    async def delete(self, user_id: Identifier) -> None:
        """Delete user by ID (no-op if absent).

        Profile and the user's own permission rows are removed by the
        schema's ON DELETE CASCADE.
        """
        ...
