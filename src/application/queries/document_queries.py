"""Document queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListDocuments:
    """Query to list documents attached to a transaction, newest first.

    Attributes:
        transaction_id: Transaction whose documents to list.
        user_id: Requesting user (for logging).
    """

    transaction_id: UUID
    user_id: UUID
