"""Global exception handlers for the FastAPI application.

Every error leaves the API as an RFC 9457 Problem Details body.

Handlers:
    http_exception_handler: HTTPException (Auth Gate 401s, 404/405)
    validation_exception_handler: RequestValidationError -> 400 with field errors
    application_error_handler: ApplicationErrorException
    generic_exception_handler: Anything else -> 500, logged, no internals leaked
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import (
    ApplicationErrorCode,
    ApplicationErrorException,
)
from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code -> (title, slug) for problem type URLs
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Invalid Input", ApplicationErrorCode.INVALID_INPUT.value),
    401: ("Authentication Required", ApplicationErrorCode.UNAUTHENTICATED.value),
    403: ("Access Denied", ApplicationErrorCode.FORBIDDEN.value),
    404: ("Resource Not Found", "not_found"),
    405: ("Method Not Allowed", "method_not_allowed"),
    500: ("Internal Server Error", ApplicationErrorCode.INTERNAL.value),
}

# Request locations that are not part of the client-facing field name
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header"})


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple | list) -> str:
    """Client-facing field name for a pydantic error location.

    ("body", "tenantId") -> "tenantId"; ("query", "transactionId") ->
    "transactionId"; a bare ("body",) stays "body".
    """
    parts = list(loc)
    prefix = "body"
    if parts and parts[0] in _LOCATION_PREFIXES:
        prefix = parts.pop(0)
    return ".".join(str(p) for p in parts) if parts else prefix


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException, keeping its headers (WWW-Authenticate)."""
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request,
        exc.status_code,
        detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Answer 400 with one ErrorDetail per invalid field.

    Example body for POST /transactions with amount 0:
        {"status": 400, "detail": "Invalid input",
         "errors": [{"field": "amount", "code": "greater_than", ...}]}
    """
    assert isinstance(exc, RequestValidationError)
    field_errors = [
        ErrorDetail(
            field=_field_name(error.get("loc", ())),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]
    return _problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Invalid input",
        errors=field_errors or None,
    )


async def application_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an ApplicationErrorException raised by a dependency."""
    assert isinstance(exc, ApplicationErrorException)
    return ErrorResponseBuilder.from_application_error(
        error=exc.error,
        request=request,
        trace_id=getattr(request.state, "trace_id", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApplicationErrorException, application_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
