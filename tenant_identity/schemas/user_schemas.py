"""User and profile response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from tenant_identity.domain.entities import Profile, User


class UserResponse(BaseModel):
    """User resource."""

    id: UUID = Field(..., description="User ID")
    auth_id: str = Field(..., description="External authentication ID")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id.uuid, auth_id=user.auth_id, created_at=user.created_at)


class ProfileResponse(BaseModel):
    """Profile resource."""

    user_id: UUID = Field(..., description="Owning user ID")
    email: str = Field(..., description="Profile email address")

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(user_id=profile.user_id.uuid, email=profile.email.value)
