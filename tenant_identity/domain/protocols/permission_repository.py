"""PermissionRepository protocol (port).

Rows are keyed by (subject, action, resource_id, resource_kind). There is
no update: a permission is either present or absent.
"""

from typing import Protocol

from tenant_identity.domain.value_objects import Identifier, Permission


class PermissionRepository(Protocol):
    """Permission repository protocol (port)."""

    async def exists(self, permission: Permission) -> bool:
        """Check whether exactly this permission is stored.

        Raises:
            RepositoryError: If the lookup fails.
        """
        ...

    async def save(self, permission: Permission) -> Permission:
        """Insert a permission.

        Raises:
            DuplicateRecordError: If the permission is already stored.
            RepositoryError: On any other storage failure (including an
                unknown subject).
        """
        ...

    async def delete(self, permission: Permission) -> bool:
        """Delete a permission (no-op if absent).

        Returns:
            True if a row was removed, False otherwise.
        """
        ...

    async def find_by_subject(self, subject: Identifier) -> list[Permission]:
        """List every permission held by a subject."""
        ...
