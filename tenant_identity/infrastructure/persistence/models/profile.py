"""Profile database model (1:1 with users)."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tenant_identity.infrastructure.persistence.base import BaseModel


class ProfileModel(BaseModel):
    """Profile model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when profile was created (from BaseModel)
        user_id: Owning user (unique, cascades on user delete)
        email: Lower-cased email address (unique, used for sign-in)
    """

    __tablename__ = "profiles"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
