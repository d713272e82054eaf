"""Async engine and session factory.

One Database per process (see ``get_database``). It owns the engine and
the session factory; units of work open sessions from it, repositories
never do. SQLite connections get ``PRAGMA foreign_keys=ON`` on connect,
otherwise the ON DELETE CASCADE rules on profiles and permissions would
be ignored.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Engine plus session factory for one database URL.

    Usage:
        db = Database("sqlite+aiosqlite:///./tenant_identity.db")
        await db.create_all()
        async with SqlAlchemyUnitOfWork(db) as uow:
            ...
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Create the engine.

        Args:
            database_url: SQLAlchemy async URL (sqlite+aiosqlite or postgresql+asyncpg).
            echo: Echo SQL statements to the SQLAlchemy logger.
            pool_size: Pooled connections; ignored for SQLite.
            max_overflow: Extra connections beyond pool_size; ignored for SQLite.
        """
        self.is_sqlite = database_url.startswith("sqlite")

        engine_options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if not self.is_sqlite:
            engine_options.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine: AsyncEngine = create_async_engine(database_url, **engine_options)

        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # Entities are mapped out of rows before commit; keep rows loaded after it
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on clean exit and rolls back on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create missing tables (startup and tests)."""
        from tenant_identity.infrastructure.persistence.base import BaseModel

        # Register every model on the metadata
        import tenant_identity.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop every table. Destroys all data; tests only."""
        from tenant_identity.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Run ``SELECT 1``; False if the database cannot be reached."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True


def _enable_sqlite_foreign_keys(dbapi_conn: Any, _: Any) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
