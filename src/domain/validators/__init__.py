"""Validators package exports."""

from src.domain.validators.functions import (
    validate_canonical_uuid,
    validate_document_url,
    validate_json_amount,
)

__all__ = [
    "validate_canonical_uuid",
    "validate_document_url",
    "validate_json_amount",
]
