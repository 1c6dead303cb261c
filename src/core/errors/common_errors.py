"""Common error classes used across all layers.

Error Types:
- AuthenticationError: Missing, malformed, invalid or expired credentials
- AuthorizationError: Access denied by the row-level-security store
- ConfigurationError: Identity provider unavailable or not configured
- StoreError: Any other failure reported by the data store

Usage:
    from src.core.errors import StoreError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=StoreError(
        code=ErrorCode.STORE_REQUEST_FAILED,
        message="insert or update violates foreign key constraint",
        store_code="23503",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing header, invalid or expired token).

    Attributes:
        reason: Provider-reported reason, when the provider gave one.
    """

    reason: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Store-reported policy or permission denial.

    Attributes:
        store_code: Error code reported by the store (e.g. "42501").
    """

    store_code: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(DomainError):
    """Operator-side failure: identity provider misconfigured or unreachable."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(DomainError):
    """Store-reported failure that is not a policy denial.

    Includes constraint violations such as a missing referenced row.

    Attributes:
        store_code: Error code reported by the store, when present.
        is_transport_failure: True when the store could not be reached or
            answered with an unreadable body.
    """

    store_code: str | None = None
    is_transport_failure: bool = False
