"""Tenant commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateTenant:
    """Command to create a tenant and make the caller its first writer.

    Attributes:
        name: Trimmed tenant name.
        user_id: Authenticated caller who becomes a write member.
    """

    name: str
    user_id: UUID
