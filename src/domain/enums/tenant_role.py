"""Per-tenant membership roles.

Roles are evaluated by the row-level-security store, never in-process:

    - read: view transactions, documents and summaries of the tenant
    - write: everything `read` allows, plus creating transactions and documents

Usage:
    from src.domain.enums import TenantRole

    if membership.role == TenantRole.WRITE:
        ...
"""

from enum import Enum


class TenantRole(str, Enum):
    """Membership role within one tenant.

    String Enum:
        Values match the store's `tenant_users.role` column.
    """

    READ = "read"
    WRITE = "write"

    @property
    def can_write(self) -> bool:
        """Check if the role allows creating data."""
        return self is TenantRole.WRITE
