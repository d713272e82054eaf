"""Permissions resource handlers.

A permission is addressed by its four canonical segments in the path:

    /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind}

For GET the path names the permission being checked. For POST and DELETE
``user_id`` is the receiving subject and the requester comes from the
X-Subject-Id header; the requester must hold the same permission.

Endpoints:
    GET    /api/permissions/{user_id}          - List permissions held
    GET    /api/permissions/{user_id}/...      - Check a permission
    POST   /api/permissions/{user_id}/...      - Grant (201, idempotent)
    DELETE /api/permissions/{user_id}/...      - Revoke (204, idempotent)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from tenant_identity.application.services import AuthorizationService
from tenant_identity.core.container import get_authorization_service
from tenant_identity.core.result import Failure, Success
from tenant_identity.presentation.routers.api.middleware.subject_dependencies import (
    get_acting_subject,
)
from tenant_identity.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from tenant_identity.presentation.routers.api.v1.errors import ErrorResponseBuilder
from tenant_identity.schemas.permission_schemas import (
    PermissionCheckResponse,
    PermissionListResponse,
    PermissionResponse,
)

permissions_router = APIRouter(prefix="/permissions", tags=["Permissions"])

PERMISSION_PATH = "/{user_id}/{action}/{resource_id}/{resource_kind}"


@permissions_router.get("/{user_id}", response_model=PermissionListResponse)
async def list_permissions(
    request: Request,
    user_id: str,
    service: AuthorizationService = Depends(get_authorization_service),
) -> PermissionListResponse | JSONResponse:
    """List every permission held by a subject.

    GET /api/permissions/{user_id} → 200 OK
    """
    match await service.list_permissions(user_id):
        case Success(value=permissions):
            return PermissionListResponse(
                permissions=[PermissionResponse.from_value(p) for p in permissions],
                total_count=len(permissions),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@permissions_router.get(PERMISSION_PATH, response_model=PermissionCheckResponse)
async def check_permission(
    request: Request,
    user_id: str,
    action: str,
    resource_id: str,
    resource_kind: str,
    service: AuthorizationService = Depends(get_authorization_service),
) -> PermissionCheckResponse | JSONResponse:
    """Check whether a subject holds a permission.

    GET /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} → 200 OK

    A permission that is not held is still 200 with ``allowed: false``.
    The echoed permission is the canonical (parsed) form.
    """
    match await service.evaluate(user_id, action, resource_id, resource_kind):
        case Success(value=(permission, allowed)):
            return PermissionCheckResponse(permission=str(permission), allowed=allowed)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@permissions_router.post(
    PERMISSION_PATH,
    response_model=PermissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def grant_permission(
    request: Request,
    user_id: str,
    action: str,
    resource_id: str,
    resource_kind: str,
    acting_subject: str = Depends(get_acting_subject),
    service: AuthorizationService = Depends(get_authorization_service),
) -> PermissionResponse | JSONResponse:
    """Grant a permission to ``user_id`` on behalf of the X-Subject-Id subject.

    POST /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} → 201 Created

    Returns:
        PermissionResponse on success (also when already held).
        JSONResponse with error on failure (400/403/500).
    """
    result = await service.grant(
        requesting_subject=acting_subject,
        receiving_subject=user_id,
        action=action,
        resource_id=resource_id,
        resource_kind=resource_kind,
    )
    match result:
        case Success(value=permission):
            return PermissionResponse.from_value(permission)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@permissions_router.delete(
    PERMISSION_PATH,
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def revoke_permission(
    request: Request,
    user_id: str,
    action: str,
    resource_id: str,
    resource_kind: str,
    acting_subject: str = Depends(get_acting_subject),
    service: AuthorizationService = Depends(get_authorization_service),
) -> Response:
    """Revoke a permission from ``user_id`` on behalf of the X-Subject-Id subject.

    DELETE /api/permissions/{user_id}/{action}/{resource_id}/{resource_kind} → 204

    Revoking a permission that is not held is also 204.
    """
    result = await service.revoke(
        requesting_subject=acting_subject,
        receiving_subject=user_id,
        action=action,
        resource_id=resource_id,
        resource_kind=resource_kind,
    )
    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
