"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.document import Document
from src.domain.entities.tenant import Membership, Tenant, TenantWithRole
from src.domain.entities.transaction import (
    NewTransaction,
    Transaction,
    TransactionAmount,
)

__all__ = [
    "Document",
    "Membership",
    "NewTransaction",
    "Tenant",
    "TenantWithRole",
    "Transaction",
    "TransactionAmount",
]
