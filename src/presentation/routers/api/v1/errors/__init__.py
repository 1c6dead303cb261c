"""Error handling for the HTTP API (RFC 9457 Problem Details).

Exports:
    ErrorDetail: Field-specific error
    ProblemDetails: RFC 9457 response body
    ErrorResponseBuilder: ApplicationError -> JSONResponse
    register_exception_handlers: Install global exception handlers
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
