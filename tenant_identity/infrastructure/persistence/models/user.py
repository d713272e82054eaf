"""User database model.

Deleting a user row cascades to its profile and to the permissions it
holds as a subject (ON DELETE CASCADE on both foreign keys).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenant_identity.infrastructure.persistence.base import BaseModel


class UserModel(BaseModel):
    """User model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when user was created (from BaseModel)
        auth_id: External authentication provider identifier (unique)
    """

    __tablename__ = "users"

    auth_id: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="External authentication provider identifier",
    )
