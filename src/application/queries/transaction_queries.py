"""Transaction queries for CQRS read operations.

All transaction queries are tenant-scoped. Visibility is decided by the
store's row-level security, not by the handlers.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListTransactions:
    """Query to list the transactions of a tenant.

    Returns transactions ordered by date DESC, then created_at DESC.

    Attributes:
        tenant_id: Tenant to list.
        user_id: Requesting user (for logging).
    """

    tenant_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetFinancialSummary:
    """Query to compute income, expense and balance totals for a tenant.

    Attributes:
        tenant_id: Tenant to summarize.
        user_id: Requesting user (for logging).
    """

    tenant_id: UUID
    user_id: UUID
