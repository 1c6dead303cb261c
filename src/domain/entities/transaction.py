"""Transaction domain entity.

Represents a single income or expense entry of one tenant. Transactions are
immutable: this service only creates and lists them.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from src.domain.enums.transaction_type import TransactionType


@dataclass(frozen=True, kw_only=True)
class Transaction:
    """Bookkeeping transaction entity.

    Invariants:
        - amount > 0; the sign is carried by transaction_type
        - belongs to exactly one tenant

    Attributes:
        id: Unique transaction identifier.
        tenant_id: Owning tenant.
        transaction_type: Income or expense.
        amount: Positive decimal amount.
        description: Non-empty description.
        transaction_date: Calendar date of the entry.
        category: Non-empty category label.
        created_by: User who created the entry.
        created_at: Creation timestamp assigned by the store.
    """

    id: UUID
    tenant_id: UUID
    transaction_type: TransactionType
    amount: Decimal
    description: str
    transaction_date: date
    category: str
    created_by: UUID
    created_at: datetime


@dataclass(frozen=True, kw_only=True)
class NewTransaction:
    """Validated transaction data ready to be inserted.

    The store assigns id and created_at.

    Attributes:
        tenant_id: Owning tenant.
        transaction_type: Income or expense.
        amount: Positive decimal amount.
        description: Non-empty description.
        transaction_date: Date in YYYY-MM-DD form.
        category: Non-empty category label.
        created_by: Authenticated caller.
    """

    tenant_id: UUID
    transaction_type: TransactionType
    amount: Decimal
    description: str
    transaction_date: str
    category: str
    created_by: UUID


@dataclass(frozen=True, kw_only=True)
class TransactionAmount:
    """Minimal projection used for aggregation.

    `transaction_type` is kept as the raw string reported by the store so the
    summary reduction can classify rows by exclusion.
    """

    transaction_type: str
    amount: Decimal
