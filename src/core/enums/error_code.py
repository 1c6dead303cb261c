"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Request validation is left to pydantic and has no codes here.

Categories:
- Authentication errors (TOKEN_*, AUTHENTICATION_*)
- Authorization errors (POLICY_*)
- Configuration errors (*_NOT_CONFIGURED, *_UNAVAILABLE)
- Store errors (STORE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Authentication errors
    AUTHORIZATION_HEADER_MISSING = "authorization_header_missing"
    TOKEN_EMPTY = "token_empty"
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    POLICY_VIOLATION = "policy_violation"

    # Configuration errors
    IDENTITY_PROVIDER_NOT_CONFIGURED = "identity_provider_not_configured"
    IDENTITY_PROVIDER_UNAVAILABLE = "identity_provider_unavailable"

    # Store errors
    STORE_REQUEST_FAILED = "store_request_failed"
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_INVALID_RESPONSE = "store_invalid_response"
