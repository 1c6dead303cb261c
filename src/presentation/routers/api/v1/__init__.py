"""API v1 routers.

Resource endpoints, all behind the Auth Gate:
    POST /transactions              - Record a transaction
    GET  /transactions?tenantId=    - List a tenant's transactions
    POST /documents                 - Attach a document to a transaction
    GET  /documents?transactionId=  - List a transaction's documents
    GET  /summary?tenantId=         - Income/expense/balance totals
    GET  /tenants                   - Tenants visible to the caller
    POST /tenants                   - Create a tenant and join it

The Auth Gate is a router-level dependency, so it runs before any handler
factory asks for the caller-scoped store.
"""

from fastapi import APIRouter, Depends, status

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_caller,
)
from src.presentation.routers.api.v1 import documents, summary, tenants, transactions
from src.presentation.routers.api.v1.errors import ProblemDetails
from src.schemas.common_schemas import CreatedResponse
from src.schemas.document_schemas import DocumentListResponse
from src.schemas.summary_schemas import FinancialSummaryResponse
from src.schemas.tenant_schemas import TenantListResponse
from src.schemas.transaction_schemas import TransactionListResponse

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ProblemDetails, "description": "Invalid input or store error"},
    401: {"model": ProblemDetails, "description": "Missing or invalid token"},
    403: {"model": ProblemDetails, "description": "Denied by tenant policy"},
    500: {"model": ProblemDetails, "description": "Internal or configuration error"},
}

v1_router = APIRouter(
    dependencies=[Depends(get_current_caller)],
    responses=_ERROR_RESPONSES,
)

v1_router.add_api_route(
    "/transactions",
    transactions.create_transaction,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    tags=["Transactions"],
    summary="Create transaction",
)
v1_router.add_api_route(
    "/transactions",
    transactions.list_transactions,
    methods=["GET"],
    response_model=TransactionListResponse,
    tags=["Transactions"],
    summary="List transactions",
)
v1_router.add_api_route(
    "/documents",
    documents.create_document,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    tags=["Documents"],
    summary="Create document",
)
v1_router.add_api_route(
    "/documents",
    documents.list_documents,
    methods=["GET"],
    response_model=DocumentListResponse,
    tags=["Documents"],
    summary="List documents",
)
v1_router.add_api_route(
    "/summary",
    summary.get_summary,
    methods=["GET"],
    response_model=FinancialSummaryResponse,
    tags=["Summary"],
    summary="Get financial summary",
)
v1_router.add_api_route(
    "/tenants",
    tenants.list_tenants,
    methods=["GET"],
    response_model=TenantListResponse,
    tags=["Tenants"],
    summary="List tenants",
)
v1_router.add_api_route(
    "/tenants",
    tenants.create_tenant,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    tags=["Tenants"],
    summary="Create tenant",
)

__all__ = [
    "v1_router",
]
