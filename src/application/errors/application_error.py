"""Application layer error types.

Application errors wrap domain errors with the closed set of error kinds the
HTTP boundary understands. The presentation layer maps each kind to exactly
one HTTP status (see ErrorResponseBuilder).

Exports:
    ApplicationErrorCode: Closed error-kind enumeration
    ApplicationError: Application layer error dataclass
    ApplicationErrorException: Carries an ApplicationError out of a dependency
    from_store_failure: Map a store failure to an ApplicationError
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import AuthorizationError, StoreError
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Closed set of error kinds.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="new row violates row-level security policy",
        ... )
    """

    INVALID_INPUT = "invalid_input"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    STORE_ERROR = "store_error"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Error kind.
        message: Human-readable message, safe to return to the caller.
        domain_error: Original domain error, if any.
        details: Additional context as key-value pairs.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


class ApplicationErrorException(Exception):
    """Raise an ApplicationError from a FastAPI dependency.

    Dependencies cannot return a Failure to the endpoint, so the Auth Gate
    raises this and a global handler renders it as Problem Details.
    """

    def __init__(self, error: ApplicationError) -> None:
        super().__init__(error.message)
        self.error = error


def from_store_failure(
    error: AuthorizationError | StoreError,
    *,
    fallback_message: str,
) -> ApplicationError:
    """Translate a store failure into an application error.

    Args:
        error: Failure reported by a tenant store.
        fallback_message: Message used when the store gave none.

    Returns:
        FORBIDDEN for policy denials, INTERNAL when the store could not be
        reached, STORE_ERROR otherwise.
    """
    message = error.message or fallback_message
    details = {"store_code": error.store_code} if error.store_code else None

    match error:
        case AuthorizationError():
            return ApplicationError(
                code=ApplicationErrorCode.FORBIDDEN,
                message=message,
                domain_error=error,
                details=details,
            )
        case StoreError(is_transport_failure=True):
            return ApplicationError(
                code=ApplicationErrorCode.INTERNAL,
                message="Internal server error",
                domain_error=error,
            )
        case _:
            return ApplicationError(
                code=ApplicationErrorCode.STORE_ERROR,
                message=message,
                domain_error=error,
                details=details,
            )
