"""Unit tests for ErrorResponseBuilder utility.

Every error kind maps to exactly one HTTP status.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _request(path: str) -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Unit tests for ErrorResponseBuilder utility class."""

    def test_from_application_error_forbidden(self):
        """Policy denial renders as 403 Problem Details."""
        # Arrange
        error = ApplicationError(
            code=ApplicationErrorCode.FORBIDDEN,
            message="new row violates row-level security policy",
        )
        trace_id = "550e8400-e29b-41d4-a716-446655440000"

        # Act
        response = ErrorResponseBuilder.from_application_error(
            error=error,
            request=_request("/transactions"),
            trace_id=trace_id,
        )

        # Assert
        assert response.status_code == 403
        content = json.loads(bytes(response.body))
        assert content["type"].endswith("/errors/forbidden")
        assert content["title"] == "Access Denied"
        assert content["detail"] == "new row violates row-level security policy"
        assert content["instance"] == "/transactions"
        assert content["trace_id"] == trace_id
        assert "errors" not in content

    def test_store_error_renders_store_message(self):
        error = ApplicationError(
            code=ApplicationErrorCode.STORE_ERROR,
            message="insert or update violates foreign key constraint",
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/documents"), trace_id=None
        )

        content = json.loads(bytes(response.body))
        assert response.status_code == 400
        assert content["title"] == "Store Request Failed"
        assert content["detail"] == error.message
        assert "errors" not in content
        assert "trace_id" not in content

    @pytest.mark.parametrize(
        "code, expected",
        [
            (ApplicationErrorCode.INVALID_INPUT, status.HTTP_400_BAD_REQUEST),
            (ApplicationErrorCode.UNAUTHENTICATED, status.HTTP_401_UNAUTHORIZED),
            (ApplicationErrorCode.FORBIDDEN, status.HTTP_403_FORBIDDEN),
            (ApplicationErrorCode.STORE_ERROR, status.HTTP_400_BAD_REQUEST),
            (
                ApplicationErrorCode.CONFIGURATION_ERROR,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
            (ApplicationErrorCode.INTERNAL, status.HTTP_500_INTERNAL_SERVER_ERROR),
        ],
    )
    def test_status_mapping(self, code, expected):
        assert ErrorResponseBuilder.get_status_code(code) == expected

    def test_every_code_has_a_title(self):
        for code in ApplicationErrorCode:
            assert ErrorResponseBuilder.get_title(code)
