"""Authentication request/response schemas.

Endpoints:
    POST /api/auth/sign-in  - Look up a profile by email
    POST /api/auth/sign-up  - Register a user under a tenant
"""

from pydantic import BaseModel, ConfigDict, Field

from tenant_identity.schemas.user_schemas import ProfileResponse, UserResponse


class SignInRequest(BaseModel):
    """Request schema for sign-in.

    POST /api/auth/sign-in
    Returns: 200 OK
    """

    email: str = Field(
        ...,
        description="Registered email address",
        examples=["user@example.com"],
    )


class SignInResponse(BaseModel):
    """Response schema for sign-in (200 OK)."""

    profile: ProfileResponse


class SignUpRequest(BaseModel):
    """Request schema for sign-up.

    POST /api/auth/sign-up
    Returns: 201 Created
    """

    email: str = Field(
        ...,
        description="Email address for the new profile",
        examples=["user@example.com"],
    )
    tenant_id: str = Field(
        ...,
        description="Tenant the user signs up under",
        examples=["0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "tenant_id": "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f",
            }
        }
    )


class SignUpResponse(BaseModel):
    """Response schema for sign-up (201 Created)."""

    user: UserResponse
    message: str = Field(default="Sign-up successful", description="Success message")
