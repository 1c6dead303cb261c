"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Closed error-kind enumeration
    ApplicationErrorException: Exception wrapper for dependencies
    from_store_failure: Store failure to application error mapping
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    ApplicationErrorException,
    from_store_failure,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "ApplicationErrorException",
    "from_store_failure",
]
