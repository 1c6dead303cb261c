"""Domain enums.

Exports:
    TenantRole: Per-tenant membership role (read, write)
    TransactionType: Transaction kind (income, expense)
"""

from src.domain.enums.tenant_role import TenantRole
from src.domain.enums.transaction_type import TransactionType

__all__ = [
    "TenantRole",
    "TransactionType",
]
