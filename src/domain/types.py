"""Annotated types with centralized validation.

Define validation once, use everywhere. Request schemas and commands declare
these types instead of repeating Field constraints.

Usage:
    from src.domain.types import Amount, CanonicalUUID, DocumentUrl

    class CreateDocumentRequest(BaseModel):
        transaction_id: CanonicalUUID
        file_url: DocumentUrl
"""

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BeforeValidator, Field, StringConstraints

from src.core.constants import DATE_PATTERN, TENANT_NAME_MAX_LENGTH
from src.domain.validators import (
    validate_canonical_uuid,
    validate_document_url,
    validate_json_amount,
)

CanonicalUUID = Annotated[
    UUID,
    BeforeValidator(validate_canonical_uuid),
    Field(examples=["3fa85f64-5717-4562-b3fc-2c963f66afa6"]),
]
"""UUID accepted only in canonical 8-4-4-4-12 hex form (case-insensitive)."""

Amount = Annotated[
    Decimal,
    BeforeValidator(validate_json_amount),
    Field(gt=0, description="Positive amount; sign is carried by type"),
]
"""Strictly positive JSON number, held as an exact Decimal."""

TransactionDate = Annotated[
    str,
    Field(pattern=DATE_PATTERN, examples=["2024-01-15"]),
]
"""Calendar date in YYYY-MM-DD form."""

NonEmptyText = Annotated[str, Field(min_length=1)]

DocumentUrl = Annotated[
    str,
    Field(min_length=1, examples=["https://files.example.com/receipt.pdf"]),
    AfterValidator(validate_document_url),
]
"""Absolute http(s) URL; file:// and other schemes rejected."""

TenantName = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=TENANT_NAME_MAX_LENGTH
    ),
]
"""Tenant display name, trimmed, 1-200 characters."""
