"""Declarative base for the persistence models.

Repositories translate between these rows and the domain entities; the
domain never sees a model. Primary keys use SQLAlchemy's generic ``Uuid``
so the same schema runs on SQLite and PostgreSQL.
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Shared ``id`` and ``created_at`` columns for every table."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


def as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps read back from stores without time zones (SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
