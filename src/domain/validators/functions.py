"""Centralized validation functions.

Validators are pure functions that raise ValueError on validation failure.
They are attached to request fields through the Annotated types in
src/domain/types.py, so every endpoint applies the same rules.
"""

import math
import re
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.constants import (
    ALLOWED_URL_PREFIXES,
    FORBIDDEN_URL_PREFIX,
    UUID_PATTERN,
)

_UUID_RE = re.compile(UUID_PATTERN, re.IGNORECASE)
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_canonical_uuid(v: Any) -> Any:
    """Validate the canonical 8-4-4-4-12 hex UUID form.

    Pydantic's own UUID parsing also accepts braces, URNs and undashed hex;
    this check narrows it to the canonical textual form. UUID instances pass
    through untouched.

    Args:
        v: Raw value to validate.

    Returns:
        The value unchanged.

    Raises:
        ValueError: If v is a string not in canonical form, or not a string.

    Example:
        >>> validate_canonical_uuid("6F9619FF-8B86-D011-B42D-00C04FC964FF")
        '6F9619FF-8B86-D011-B42D-00C04FC964FF'
        >>> validate_canonical_uuid("not-a-uuid")
        ValueError: Invalid UUID
    """
    if isinstance(v, str):
        if not _UUID_RE.fullmatch(v):
            raise ValueError("Invalid UUID")
        return v
    if isinstance(v, UUID):
        return v
    raise ValueError("Invalid UUID")


def validate_json_amount(v: Any) -> Decimal:
    """Validate that an amount is a finite JSON number and convert to Decimal.

    Numeric strings and booleans are rejected. Floats are converted through
    their shortest repr so 0.1 becomes Decimal("0.1"). Amounts are stored
    and returned as JSON numbers, so a value a double cannot hold exactly
    (an integer beyond 2**53, or one that overflows) is rejected.

    Args:
        v: Raw amount value.

    Returns:
        Exact Decimal representation.

    Raises:
        ValueError: If v is not a finite number or does not fit a double.
    """
    if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
        raise ValueError("Amount must be a number")
    if isinstance(v, float) and not math.isfinite(v):
        raise ValueError("Amount must be a finite number")
    amount = v if isinstance(v, Decimal) else Decimal(str(v))
    if not amount.is_finite():
        raise ValueError("Amount must be a finite number")
    as_float = float(amount)
    if not math.isfinite(as_float) or Decimal(repr(as_float)) != amount:
        raise ValueError("Amount cannot be represented exactly as a JSON number")
    return amount


def validate_document_url(v: str) -> str:
    """Validate a document URL.

    Local file URLs are rejected explicitly before the scheme allow-list is
    checked.

    Args:
        v: URL to validate.

    Returns:
        URL unchanged.

    Raises:
        ValueError: If the URL is a file URL, uses another scheme, or is
            malformed.

    Example:
        >>> validate_document_url("https://cdn.example.com/receipt.pdf")
        'https://cdn.example.com/receipt.pdf'
        >>> validate_document_url("file:///etc/passwd")
        ValueError: Local file URLs (file://) are not allowed. ...
    """
    if v.startswith(FORBIDDEN_URL_PREFIX):
        raise ValueError(
            "Local file URLs (file://) are not allowed. "
            "Please use an HTTP or HTTPS URL."
        )
    if not v.startswith(ALLOWED_URL_PREFIXES):
        raise ValueError("URL must start with http:// or https://")
    try:
        _URL_ADAPTER.validate_python(v)
    except PydanticValidationError as e:
        raise ValueError("Invalid URL") from e
    return v
