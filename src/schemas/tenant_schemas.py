"""Tenant request and response schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.tenant import TenantWithRole
from src.domain.enums.tenant_role import TenantRole
from src.domain.types import TenantName


class CreateTenantRequest(BaseModel):
    """Request to create a tenant; the caller becomes a write member.

    Attributes:
        name: Tenant name, trimmed, 1-200 characters.
    """

    name: TenantName


class TenantResponse(BaseModel):
    """Tenant with the caller's role."""

    id: UUID = Field(..., description="Tenant unique identifier")
    name: str = Field(..., description="Tenant name")
    role: TenantRole | None = Field(
        None, description="Caller's role, null without membership"
    )

    @classmethod
    def from_entity(cls, entry: TenantWithRole) -> "TenantResponse":
        return cls(id=entry.tenant.id, name=entry.tenant.name, role=entry.role)


class TenantListResponse(BaseModel):
    """Tenants visible to the caller, ordered by name."""

    tenants: list[TenantResponse] = Field(default_factory=list)
