"""Error response builder for RFC 9457 Problem Details.

The only place where error kinds are mapped to HTTP status codes.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails

_STATUS_BY_CODE: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.STORE_ERROR: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.CONFIGURATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.INVALID_INPUT: "Invalid Input",
    ApplicationErrorCode.UNAUTHENTICATED: "Authentication Required",
    ApplicationErrorCode.FORBIDDEN: "Access Denied",
    ApplicationErrorCode.STORE_ERROR: "Store Request Failed",
    ApplicationErrorCode.CONFIGURATION_ERROR: "Server Configuration Error",
    ApplicationErrorCode.INTERNAL: "Internal Server Error",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="permission denied for table transactions",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=trace_id,
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert.
            request: FastAPI Request (for the instance path).
            trace_id: Request trace ID.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map an error kind to its HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.STORE_ERROR)
            400
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Human-readable title for an error kind."""
        return _TITLE_BY_CODE.get(code, "Internal Server Error")
