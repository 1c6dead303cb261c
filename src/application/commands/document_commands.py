"""Document commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateDocument:
    """Command to attach an externally hosted file to a transaction.

    Attributes:
        transaction_id: Transaction the document belongs to.
        file_url: Absolute http(s) URL, already validated.
        user_id: Authenticated caller (used for logging only).
    """

    transaction_id: UUID
    file_url: str
    user_id: UUID
