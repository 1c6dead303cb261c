"""Tenant and membership entities.

A tenant is an isolated organizational unit (club, association, company)
owning its own transactions and documents. Memberships bind a user to a
tenant with a role.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.tenant_role import TenantRole


@dataclass(frozen=True, kw_only=True)
class Tenant:
    """Tenant entity.

    Attributes:
        id: Tenant unique identifier.
        name: Display name.
    """

    id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class Membership:
    """Binding of one user to one tenant.

    Unique per (user_id, tenant_id). Created atomically together with the
    tenant by the store; never mutated by this service.

    Attributes:
        user_id: Member's user identifier.
        tenant_id: Tenant the membership grants access to.
        role: Role within the tenant.
    """

    user_id: UUID
    tenant_id: UUID
    role: TenantRole


@dataclass(frozen=True, kw_only=True)
class TenantWithRole:
    """Tenant as seen by one caller, with the caller's role attached.

    Attributes:
        tenant: The tenant.
        role: Caller's role, or None when the store exposes the tenant without
            a membership row for the caller.
    """

    tenant: Tenant
    role: TenantRole | None
