"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Timeouts: Default timeouts for external service calls
- Prefixes: Standard protocol prefixes
- Formats: Wire formats accepted by the HTTP contract
- Store codes: Error codes reported by the row-level-security store
- Limits: Truncation and safety limits

Example:
    >>> from src.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Timeouts
# =============================================================================

IDENTITY_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for token verification calls in seconds."""

STORE_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for data store calls in seconds."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Formats
# =============================================================================

UUID_PATTERN: str = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
"""Canonical 8-4-4-4-12 hex UUID form (case-insensitive)."""

DATE_PATTERN: str = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
"""Transaction date format (YYYY-MM-DD, ASCII digits only)."""

ALLOWED_URL_PREFIXES: tuple[str, ...] = ("http://", "https://")
"""Document URL prefixes accepted by the API."""

FORBIDDEN_URL_PREFIX: str = "file://"
"""Local file URLs are always rejected."""

TENANT_NAME_MAX_LENGTH: int = 200
"""Maximum length of a tenant name."""


# =============================================================================
# Store Codes
# =============================================================================

POLICY_VIOLATION_CODE: str = "42501"
"""PostgreSQL insufficient_privilege (raised by row-level security)."""

POLICY_VIOLATION_MARKERS: tuple[str, ...] = (
    "permission",
    "row-level security",
    "policy",
)
"""Message substrings that identify a store-side policy denial."""

CREATE_TENANT_FUNCTION: str = "create_tenant_and_join"
"""Store function that atomically creates a tenant and the caller's membership."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""
