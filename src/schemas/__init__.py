"""Request/response schemas for API endpoints.

Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CreateTransactionRequest, TransactionListResponse
"""

from src.schemas.common_schemas import CamelModel, CreatedResponse, JsonAmount
from src.schemas.document_schemas import (
    CreateDocumentRequest,
    DocumentListResponse,
    DocumentResponse,
)
from src.schemas.summary_schemas import FinancialSummaryResponse
from src.schemas.tenant_schemas import (
    CreateTenantRequest,
    TenantListResponse,
    TenantResponse,
)
from src.schemas.transaction_schemas import (
    CreateTransactionRequest,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    "CamelModel",
    "CreateDocumentRequest",
    "CreateTenantRequest",
    "CreateTransactionRequest",
    "CreatedResponse",
    "DocumentListResponse",
    "DocumentResponse",
    "FinancialSummaryResponse",
    "JsonAmount",
    "TenantListResponse",
    "TenantResponse",
    "TransactionListResponse",
    "TransactionResponse",
]
