"""Unit of work protocol (port).

A unit of work is one transaction spanning every repository it exposes.
Leaving the ``async with`` block without ``commit()`` rolls back.

Usage:
    async with uow_factory() as uow:
        await uow.users.save(user)
        await uow.profiles.save(profile)
        await uow.commit()
"""

from collections.abc import Callable
from types import TracebackType
from typing import Protocol, Self

from tenant_identity.domain.protocols.permission_repository import (
    PermissionRepository,
)
from tenant_identity.domain.protocols.profile_repository import ProfileRepository
from tenant_identity.domain.protocols.tenant_repository import TenantRepository
from tenant_identity.domain.protocols.user_repository import UserRepository


class UnitOfWorkProtocol(Protocol):
    """Transaction boundary over the four repositories."""

    users: UserRepository
    profiles: ProfileRepository
    tenants: TenantRepository
    permissions: PermissionRepository

    async def __aenter__(self) -> Self:
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...

    async def commit(self) -> None:
        """Commit the transaction.

        Raises:
            RepositoryError: If the commit fails.
        """
        ...

    async def rollback(self) -> None:
        ...


UnitOfWorkFactory = Callable[[], UnitOfWorkProtocol]
