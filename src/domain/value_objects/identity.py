"""Authenticated caller identity value object."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class Identity:
    """User identity resolved from a bearer token by the identity provider.

    Attributes:
        user_id: Stable user identifier.
        email: Email reported by the provider, if any. Never logged.
    """

    user_id: UUID
    email: str | None = None
