"""Document request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.document import Document
from src.domain.types import CanonicalUUID, DocumentUrl
from src.schemas.common_schemas import CamelModel


class CreateDocumentRequest(CamelModel):
    """Request to attach a document to a transaction.

    Attributes:
        transaction_id: Existing transaction.
        file_url: Absolute http(s) URL. file:// URLs are rejected.
    """

    transaction_id: CanonicalUUID
    file_url: DocumentUrl


class DocumentResponse(CamelModel):
    """Single document response."""

    id: UUID = Field(..., description="Document unique identifier")
    transaction_id: UUID = Field(..., description="Parent transaction")
    file_url: str = Field(..., description="File URL")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            transaction_id=document.transaction_id,
            file_url=document.file_url,
            created_at=document.created_at,
        )


class DocumentListResponse(BaseModel):
    """Documents of one transaction, newest first."""

    documents: list[DocumentResponse] = Field(default_factory=list)
