"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (ListTransactions, GetFinancialSummary). Queries
never change state.
"""

from src.application.queries.document_queries import ListDocuments
from src.application.queries.tenant_queries import ListTenants
from src.application.queries.transaction_queries import (
    GetFinancialSummary,
    ListTransactions,
)

__all__ = [
    "GetFinancialSummary",
    "ListDocuments",
    "ListTenants",
    "ListTransactions",
]
