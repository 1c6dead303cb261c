"""Summary resource handler.

Handlers:
    get_summary - GET /summary?tenantId=
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.get_financial_summary_handler import (
    GetFinancialSummaryHandler,
)
from src.application.queries.transaction_queries import GetFinancialSummary
from src.core.container import get_financial_summary_handler
from src.core.result import Failure
from src.domain.types import CanonicalUUID
from src.presentation.routers.api.middleware.auth_dependencies import CurrentCaller
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.summary_schemas import FinancialSummaryResponse


async def get_summary(
    request: Request,
    caller: CurrentCaller,
    tenant_id: Annotated[
        CanonicalUUID, Query(alias="tenantId", description="Tenant UUID")
    ],
    handler: GetFinancialSummaryHandler = Depends(get_financial_summary_handler),
) -> FinancialSummaryResponse | JSONResponse:
    """Compute income, expense and balance totals for a tenant.

    GET /summary?tenantId= -> 200 OK

    A tenant without transactions (or invisible to the caller) yields zeros.
    """
    result = await handler.handle(
        GetFinancialSummary(tenant_id=tenant_id, user_id=caller.user_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return FinancialSummaryResponse.from_summary(result.value)
