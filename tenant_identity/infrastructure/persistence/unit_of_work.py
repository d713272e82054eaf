"""SQLAlchemy unit of work.

One AsyncSession per unit of work; all four repositories share it, so
every write between ``async with`` and ``commit()`` lands atomically.
Leaving the block without committing rolls everything back.

Usage:
    async with SqlAlchemyUnitOfWork(database) as uow:
        await uow.users.save(user)
        await uow.profiles.save(profile)
        await uow.commit()
"""

from types import TracebackType
from typing import Self

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_identity.infrastructure.persistence.database import Database
from tenant_identity.infrastructure.persistence.errors import translate_error
from tenant_identity.infrastructure.persistence.repositories import (
    PermissionRepository,
    ProfileRepository,
    TenantRepository,
    UserRepository,
)


class SqlAlchemyUnitOfWork:
    """Transaction boundary implementing UnitOfWorkProtocol.

    Attributes:
        users: User repository bound to this transaction.
        profiles: Profile repository bound to this transaction.
        tenants: Tenant repository bound to this transaction.
        permissions: Permission repository bound to this transaction.
    """

    users: UserRepository
    profiles: ProfileRepository
    tenants: TenantRepository
    permissions: PermissionRepository

    def __init__(self, database: Database) -> None:
        self._database = database
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        self._session = self._database.async_session()
        self.users = UserRepository(self._session)
        self.profiles = ProfileRepository(self._session)
        self.tenants = TenantRepository(self._session)
        self.permissions = PermissionRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is None:
            return
        try:
            await self.rollback()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        """Commit the transaction.

        Raises:
            RepositoryError: If the commit fails.
        """
        try:
            await self._active_session.commit()
        except SQLAlchemyError as e:
            raise translate_error(e, "commit") from e

    async def rollback(self) -> None:
        """Roll back anything not yet committed (no-op after commit)."""
        await self._active_session.rollback()

    @property
    def _active_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work used outside 'async with'")
        return self._session
