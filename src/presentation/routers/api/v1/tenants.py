"""Tenants resource handlers.

Handlers:
    list_tenants  - GET /tenants
    create_tenant - POST /tenants (tenant + caller's write membership, atomic)
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_tenant_handler import (
    CreateTenantHandler,
)
from src.application.commands.tenant_commands import CreateTenant
from src.application.queries.handlers.list_tenants_handler import (
    ListTenantsHandler,
)
from src.application.queries.tenant_queries import ListTenants
from src.core.container import get_create_tenant_handler, get_list_tenants_handler
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import CurrentCaller
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import CreatedResponse
from src.schemas.tenant_schemas import (
    CreateTenantRequest,
    TenantListResponse,
    TenantResponse,
)


async def list_tenants(
    request: Request,
    caller: CurrentCaller,
    handler: ListTenantsHandler = Depends(get_list_tenants_handler),
) -> TenantListResponse | JSONResponse:
    """List tenants visible to the caller with the caller's role.

    GET /tenants -> 200 OK
    """
    result = await handler.handle(ListTenants(user_id=caller.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return TenantListResponse(
        tenants=[TenantResponse.from_entity(entry) for entry in result.value]
    )


async def create_tenant(
    request: Request,
    caller: CurrentCaller,
    body: CreateTenantRequest,
    handler: CreateTenantHandler = Depends(get_create_tenant_handler),
) -> CreatedResponse | JSONResponse:
    """Create a tenant and make the caller a write member.

    POST /tenants -> 201 Created
    """
    result = await handler.handle(CreateTenant(name=body.name, user_id=caller.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return CreatedResponse(id=result.value)
