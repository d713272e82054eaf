"""PermissionRepository - SQLAlchemy implementation of PermissionRepository protocol.

Permissions are matched on the full (subject, action, resource_id,
resource_kind) key; there is no partial or wildcard matching.
"""

from sqlalchemy import ColumnElement, and_, delete, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_identity.domain.value_objects import Identifier, Permission
from tenant_identity.infrastructure.persistence.errors import translate_error
from tenant_identity.infrastructure.persistence.models import PermissionModel


class PermissionRepository:
    """SQLAlchemy implementation of PermissionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with uow_factory() as uow:
        ...     allowed = await uow.permissions.exists(permission)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def exists(self, permission: Permission) -> bool:
        """Check whether exactly this permission is stored.

        Args:
            permission: Permission to look up.

        Returns:
            True if a matching row exists, False otherwise.

        Raises:
            RepositoryError: If the query fails.
        """
        stmt = select(exists().where(_matches(permission)))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "permissions.exists") from e
        return bool(result.scalar())

    async def save(self, permission: Permission) -> Permission:
        """Insert a permission.

        Args:
            permission: Permission to persist.

        Returns:
            The persisted permission.

        Raises:
            DuplicateRecordError: If the permission is already stored.
            RepositoryError: On any other storage failure (including a
                subject that is not a stored user).
        """
        _, action, resource_id, resource_kind = permission.key
        self.session.add(
            PermissionModel(
                subject=permission.subject.uuid,
                action=action,
                resource_id=resource_id,
                resource_kind=resource_kind,
            )
        )
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise translate_error(e, "permissions.save") from e
        return permission

    async def delete(self, permission: Permission) -> bool:
        """Delete a permission (no-op if absent).

        Returns:
            True if a row was removed, False if there was nothing to delete.

        Raises:
            RepositoryError: If the delete fails.
        """
        stmt = delete(PermissionModel).where(_matches(permission))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "permissions.delete") from e
        return bool(result.rowcount)

    async def find_by_subject(self, subject: Identifier) -> list[Permission]:
        """List every permission held by a subject, oldest first.

        Raises:
            RepositoryError: If the query fails.
        """
        stmt = (
            select(PermissionModel)
            .where(PermissionModel.subject == subject.uuid)
            .order_by(PermissionModel.created_at, PermissionModel.action)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "permissions.find_by_subject") from e
        return [self._to_domain(model) for model in result.scalars()]

    def _to_domain(self, permission_model: PermissionModel) -> Permission:
        return Permission.from_parts(
            str(permission_model.subject),
            permission_model.action,
            permission_model.resource_id,
            permission_model.resource_kind,
        )


def _matches(permission: Permission) -> ColumnElement[bool]:
    _, action, resource_id, resource_kind = permission.key
    return and_(
        PermissionModel.subject == permission.subject.uuid,
        PermissionModel.action == action,
        PermissionModel.resource_id == resource_id,
        PermissionModel.resource_kind == resource_kind,
    )
