"""Auth resource handlers.

Endpoints:
    POST /api/auth/sign-in - Look up the profile registered under an email
    POST /api/auth/sign-up - Create a user, its profile and owner permissions
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from tenant_identity.application.services import AuthService
from tenant_identity.core.container import get_auth_service
from tenant_identity.core.result import Failure, Success
from tenant_identity.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from tenant_identity.presentation.routers.api.v1.errors import ErrorResponseBuilder
from tenant_identity.schemas.auth_schemas import (
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
)
from tenant_identity.schemas.user_schemas import ProfileResponse, UserResponse

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/sign-in", response_model=SignInResponse)
async def sign_in(
    request: Request,
    data: SignInRequest,
    service: AuthService = Depends(get_auth_service),
) -> SignInResponse | JSONResponse:
    """Sign in by email.

    POST /api/auth/sign-in → 200 OK

    Returns:
        SignInResponse on success.
        JSONResponse with error on failure (400/404/500).
    """
    match await service.sign_in(data.email):
        case Success(value=profile):
            return SignInResponse(profile=ProfileResponse.from_entity(profile))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@auth_router.post(
    "/sign-up",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(
    request: Request,
    data: SignUpRequest,
    service: AuthService = Depends(get_auth_service),
) -> SignUpResponse | JSONResponse:
    """Sign up under a tenant.

    POST /api/auth/sign-up → 201 Created

    Returns:
        SignUpResponse on success.
        JSONResponse with error on failure (400/409/500).
    """
    match await service.sign_up(data.email, data.tenant_id):
        case Success(value=user):
            return SignUpResponse(user=UserResponse.from_entity(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
