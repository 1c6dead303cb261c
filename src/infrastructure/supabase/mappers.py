"""Row mappers for PostgREST responses.

Convert JSON rows (snake_case columns) into domain entities. Mappers raise
KeyError, TypeError or ValueError on malformed rows; the store adapter turns
those into StoreError results.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from src.domain.entities.document import Document
from src.domain.entities.tenant import Membership, Tenant
from src.domain.entities.transaction import (
    NewTransaction,
    Transaction,
    TransactionAmount,
)
from src.domain.enums.tenant_role import TenantRole
from src.domain.enums.transaction_type import TransactionType


def _to_decimal(value: Any) -> Decimal:
    # numeric columns arrive as JSON numbers or, for large values, strings
    if isinstance(value, bool):
        raise TypeError("amount must be numeric")
    return Decimal(str(value))


def transaction_from_row(row: dict[str, Any]) -> Transaction:
    """Map a `transactions` row to a Transaction entity."""
    return Transaction(
        id=UUID(row["id"]),
        tenant_id=UUID(row["tenant_id"]),
        transaction_type=TransactionType(row["type"]),
        amount=_to_decimal(row["amount"]),
        description=row["description"],
        transaction_date=date.fromisoformat(row["date"]),
        category=row["category"],
        created_by=UUID(row["created_by"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def transaction_amount_from_row(row: dict[str, Any]) -> TransactionAmount:
    """Map a `type, amount` projection row."""
    return TransactionAmount(
        transaction_type=str(row["type"]),
        amount=_to_decimal(row["amount"]),
    )


def transaction_to_row(transaction: NewTransaction) -> dict[str, Any]:
    """Map a NewTransaction to an insert payload.

    The amount is sent as a JSON number; validated amounts fit a double
    exactly, so the conversion is lossless.
    """
    return {
        "tenant_id": str(transaction.tenant_id),
        "type": transaction.transaction_type.value,
        "amount": float(transaction.amount),
        "description": transaction.description,
        "date": transaction.transaction_date,
        "category": transaction.category,
        "created_by": str(transaction.created_by),
    }


def document_from_row(row: dict[str, Any]) -> Document:
    """Map a `documents` row to a Document entity."""
    return Document(
        id=UUID(row["id"]),
        transaction_id=UUID(row["transaction_id"]),
        file_url=row["file_url"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def tenant_from_row(row: dict[str, Any]) -> Tenant:
    """Map a `tenants` row to a Tenant entity."""
    return Tenant(id=UUID(row["id"]), name=row["name"])


def membership_from_row(row: dict[str, Any]) -> Membership:
    """Map a `tenant_users` row to a Membership entity."""
    return Membership(
        user_id=UUID(row["user_id"]),
        tenant_id=UUID(row["tenant_id"]),
        role=TenantRole(row["role"]),
    )
