"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLite or PostgreSQL via SQLAlchemy async)
- Logging (structlog console)
- Unit of work factory (one transaction per service operation)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from tenant_identity.core.config import settings
from tenant_identity.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
    from tenant_identity.domain.protocols.unit_of_work_protocol import (
        UnitOfWorkFactory,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.

    Usage:
        db = get_database()
        await db.create_all()
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from tenant_identity.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.is_testing or settings.is_production,
        level=settings.log_level,
    )


@lru_cache()
def get_unit_of_work_factory() -> "UnitOfWorkFactory":
    """Get the unit of work factory bound to the database singleton.

    Services call the factory once per operation:

        async with uow_factory() as uow:
            ...
            await uow.commit()

    Returns:
        Zero-argument callable creating SqlAlchemyUnitOfWork instances.
    """
    from tenant_identity.infrastructure.persistence.unit_of_work import (
        SqlAlchemyUnitOfWork,
    )

    database = get_database()
    return lambda: SqlAlchemyUnitOfWork(database)
