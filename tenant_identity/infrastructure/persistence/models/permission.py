"""Permission database model.

One row per granted permission. The unique constraint on
(subject, action, resource_id, resource_kind) is what makes concurrent
grants of the same permission collapse into a single row.

Rows whose resource was deleted are kept; only the subject side cascades.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tenant_identity.infrastructure.persistence.base import BaseModel


class PermissionModel(BaseModel):
    """Permission model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when granted (from BaseModel)
        subject: User holding the permission (cascades on user delete)
        action: "<verb>-<target>" string
        resource_id: Identifier of the resource
        resource_kind: "user" or "tenant"
    """

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint(
            "subject",
            "action",
            "resource_id",
            "resource_kind",
            name="uq_permissions_key",
        ),
    )

    subject: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    resource_id: Mapped[str] = mapped_column(String(255), nullable=False)
    resource_kind: Mapped[str] = mapped_column(String(32), nullable=False)
