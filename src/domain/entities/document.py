"""Document domain entity.

A document is an externally hosted file (receipt, invoice) attached to a
transaction by URL.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class Document:
    """Document attached to a transaction.

    Invariants:
        - file_url is an absolute http(s) URL
        - transaction_id references an existing transaction (store-enforced)

    Attributes:
        id: Unique document identifier.
        transaction_id: Transaction the document belongs to.
        file_url: Absolute http(s) URL of the file.
        created_at: Creation timestamp assigned by the store.
    """

    id: UUID
    transaction_id: UUID
    file_url: str
    created_at: datetime
