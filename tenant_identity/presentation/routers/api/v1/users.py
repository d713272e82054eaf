"""Users resource handlers.

Endpoints:
    GET    /api/users/{user_id} - Fetch a user
    DELETE /api/users/{user_id} - Delete a user (requires write-user on it)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from tenant_identity.application.services import UserService
from tenant_identity.core.container import get_user_service
from tenant_identity.core.result import Failure, Success
from tenant_identity.presentation.routers.api.middleware.subject_dependencies import (
    get_acting_subject,
)
from tenant_identity.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from tenant_identity.presentation.routers.api.v1.errors import ErrorResponseBuilder
from tenant_identity.schemas.user_schemas import UserResponse

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    request: Request,
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse | JSONResponse:
    """Fetch a user.

    GET /api/users/{user_id} → 200 OK
    """
    match await service.find_user(user_id):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@users_router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    request: Request,
    user_id: str,
    acting_subject: str = Depends(get_acting_subject),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user on behalf of the X-Subject-Id subject.

    DELETE /api/users/{user_id} → 204 No Content

    Returns:
        204 on success.
        JSONResponse with error on failure (400/403/404/500).
    """
    match await service.delete_user(acting_subject, user_id):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
