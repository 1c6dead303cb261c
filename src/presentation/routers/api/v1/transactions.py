"""Transactions resource handlers.

Handlers:
    create_transaction - POST /transactions (write role, enforced by the store)
    list_transactions  - GET /transactions?tenantId=
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_transaction_handler import (
    CreateTransactionHandler,
)
from src.application.commands.transaction_commands import CreateTransaction
from src.application.queries.handlers.list_transactions_handler import (
    ListTransactionsHandler,
)
from src.application.queries.transaction_queries import ListTransactions
from src.core.container import (
    get_create_transaction_handler,
    get_list_transactions_handler,
)
from src.core.result import Failure
from src.domain.types import CanonicalUUID
from src.presentation.routers.api.middleware.auth_dependencies import CurrentCaller
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import CreatedResponse
from src.schemas.transaction_schemas import (
    CreateTransactionRequest,
    TransactionListResponse,
)


async def create_transaction(
    request: Request,
    caller: CurrentCaller,
    body: CreateTransactionRequest,
    handler: CreateTransactionHandler = Depends(get_create_transaction_handler),
) -> CreatedResponse | JSONResponse:
    """Record an income or expense entry.

    POST /transactions -> 201 Created

    Args:
        request: FastAPI request object.
        caller: Authenticated caller.
        body: Validated transaction data.
        handler: Create transaction handler (injected).

    Returns:
        CreatedResponse with the new id.
        JSONResponse with RFC 9457 error on failure (403 policy denial,
        400 other store failure).
    """
    result = await handler.handle(
        CreateTransaction(
            tenant_id=body.tenant_id,
            user_id=caller.user_id,
            transaction_type=body.transaction_type,
            amount=body.amount,
            description=body.description,
            transaction_date=body.transaction_date,
            category=body.category,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return CreatedResponse(id=result.value)


async def list_transactions(
    request: Request,
    caller: CurrentCaller,
    tenant_id: Annotated[
        CanonicalUUID, Query(alias="tenantId", description="Tenant UUID")
    ],
    handler: ListTransactionsHandler = Depends(get_list_transactions_handler),
) -> TransactionListResponse | JSONResponse:
    """List a tenant's transactions.

    GET /transactions?tenantId= -> 200 OK

    Ordered by date DESC, then created_at DESC. Tenants the caller is not a
    member of yield an empty list (or 403 when the store denies the read).
    """
    result = await handler.handle(
        ListTransactions(tenant_id=tenant_id, user_id=caller.user_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return TransactionListResponse.from_entities(result.value)
