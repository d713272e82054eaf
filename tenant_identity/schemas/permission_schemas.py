"""Permission request/response schemas.

Endpoints:
    GET    /api/permissions/{user_id}                                      - List held permissions
    GET    /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} - Check
    POST   /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} - Grant
    DELETE /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} - Revoke
"""

from pydantic import BaseModel, Field

from tenant_identity.domain.value_objects import Permission


class PermissionResponse(BaseModel):
    """A single permission in both structured and canonical form."""

    subject: str = Field(..., description="Subject holding the permission")
    action: str = Field(..., description="'<verb>-<target>'", examples=["write-user"])
    resource_id: str = Field(..., description="Resource the permission applies to")
    resource_kind: str = Field(..., description="Resource kind", examples=["user"])
    permission: str = Field(
        ...,
        description="Canonical 'subject:action:resource_id:resource_kind' string",
    )

    @classmethod
    def from_value(cls, permission: Permission) -> "PermissionResponse":
        subject, action, resource_id, resource_kind = permission.key
        return cls(
            subject=subject,
            action=action,
            resource_id=resource_id,
            resource_kind=resource_kind,
            permission=str(permission),
        )


class PermissionCheckResponse(BaseModel):
    """Result of a permission check (200 OK)."""

    permission: str = Field(..., description="Canonical permission string checked")
    allowed: bool = Field(..., description="True if the subject holds the permission")


class PermissionListResponse(BaseModel):
    """Permissions held by a subject (200 OK)."""

    permissions: list[PermissionResponse]
    total_count: int = Field(..., description="Number of permissions")
