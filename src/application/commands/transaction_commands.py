"""Transaction commands.

Commands carry already-validated input. Role checks are not performed here:
the store rejects writes from callers without the write role.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.enums.transaction_type import TransactionType


@dataclass(frozen=True, kw_only=True)
class CreateTransaction:
    """Command to record an income or expense entry for a tenant.

    Attributes:
        tenant_id: Target tenant.
        user_id: Authenticated caller, recorded as created_by.
        transaction_type: Income or expense.
        amount: Strictly positive amount.
        description: Non-empty description.
        transaction_date: Date in YYYY-MM-DD form.
        category: Non-empty category.
    """

    tenant_id: UUID
    user_id: UUID
    transaction_type: TransactionType
    amount: Decimal
    description: str
    transaction_date: str
    category: str
