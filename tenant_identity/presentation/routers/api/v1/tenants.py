"""Tenants resource handlers.

Endpoints:
    POST   /api/tenants             - Create a tenant owned by X-Subject-Id
    GET    /api/tenants/{tenant_id} - Fetch a tenant
    DELETE /api/tenants/{tenant_id} - Delete a tenant (requires write-tenant)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from tenant_identity.application.services import TenantService
from tenant_identity.core.container import get_tenant_service
from tenant_identity.core.result import Failure, Success
from tenant_identity.presentation.routers.api.middleware.subject_dependencies import (
    get_acting_subject,
)
from tenant_identity.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from tenant_identity.presentation.routers.api.v1.errors import ErrorResponseBuilder
from tenant_identity.schemas.tenant_schemas import TenantCreateRequest, TenantResponse

tenants_router = APIRouter(prefix="/tenants", tags=["Tenants"])


@tenants_router.post(
    "",
    response_model=TenantResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_tenant(
    request: Request,
    data: TenantCreateRequest,
    acting_subject: str = Depends(get_acting_subject),
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse | JSONResponse:
    """Create a tenant; the creator receives read-tenant and write-tenant.

    POST /api/tenants → 201 Created
    """
    match await service.create_tenant(acting_subject, data.name):
        case Success(value=tenant):
            return TenantResponse.from_entity(tenant)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@tenants_router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(
    request: Request,
    tenant_id: str,
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse | JSONResponse:
    """Fetch a tenant.

    GET /api/tenants/{tenant_id} → 200 OK
    """
    match await service.find_tenant(tenant_id):
        case Success(value=tenant):
            return TenantResponse.from_entity(tenant)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@tenants_router.delete(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_tenant(
    request: Request,
    tenant_id: str,
    acting_subject: str = Depends(get_acting_subject),
    service: TenantService = Depends(get_tenant_service),
) -> Response:
    """Delete a tenant on behalf of the X-Subject-Id subject.

    DELETE /api/tenants/{tenant_id} → 204 No Content
    """
    match await service.delete_tenant(acting_subject, tenant_id):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
