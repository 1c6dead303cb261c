"""Tenant queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListTenants:
    """Query to list the tenants visible to a user with the user's role.

    Attributes:
        user_id: Requesting user.
    """

    user_id: UUID
