"""Transaction request and response schemas.

Request validation is the whole validation layer for transactions: a body
that fails here never reaches the store.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.transaction import Transaction
from src.domain.enums.transaction_type import TransactionType
from src.domain.types import Amount, CanonicalUUID, NonEmptyText, TransactionDate
from src.schemas.common_schemas import CamelModel, JsonAmount


# =============================================================================
# Request Schemas
# =============================================================================


class CreateTransactionRequest(CamelModel):
    """Request to record a transaction.

    Attributes:
        tenant_id: Tenant the entry belongs to.
        transaction_type: "income" or "expense" (JSON key "type").
        amount: Strictly positive JSON number.
        description: Non-empty description.
        transaction_date: YYYY-MM-DD (JSON key "date").
        category: Non-empty category.
    """

    tenant_id: CanonicalUUID
    transaction_type: TransactionType = Field(..., alias="type")
    amount: Amount
    description: NonEmptyText
    transaction_date: TransactionDate = Field(..., alias="date")
    category: NonEmptyText


# =============================================================================
# Response Schemas
# =============================================================================


class TransactionResponse(CamelModel):
    """Single transaction response."""

    id: UUID = Field(..., description="Transaction unique identifier")
    tenant_id: UUID = Field(..., description="Owning tenant")
    transaction_type: TransactionType = Field(
        ..., alias="type", description="Transaction type", examples=["income"]
    )
    amount: JsonAmount = Field(..., description="Positive amount")
    description: str = Field(..., description="Description")
    transaction_date: date = Field(..., alias="date", description="Entry date")
    category: str = Field(..., description="Category")
    created_by: UUID = Field(..., description="User who created the entry")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        """Convert a Transaction entity to response schema."""
        return cls(
            id=transaction.id,
            tenant_id=transaction.tenant_id,
            transaction_type=transaction.transaction_type,
            amount=transaction.amount,
            description=transaction.description,
            transaction_date=transaction.transaction_date,
            category=transaction.category,
            created_by=transaction.created_by,
            created_at=transaction.created_at,
        )


class TransactionListResponse(BaseModel):
    """Transactions of one tenant, date DESC then created_at DESC."""

    transactions: list[TransactionResponse] = Field(default_factory=list)

    @classmethod
    def from_entities(
        cls, transactions: list[Transaction]
    ) -> "TransactionListResponse":
        return cls(
            transactions=[TransactionResponse.from_entity(t) for t in transactions]
        )
