"""Unit tests for TraceMiddleware.

Covers trace id reuse and generation, the response header, request.state,
and the contextvar being visible only while the request is handled.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


def _call_next() -> AsyncMock:
    response = MagicMock()
    response.headers = {}
    return AsyncMock(return_value=response)


@pytest.mark.unit
class TestTraceMiddleware:
    async def test_generates_uuid_when_header_missing(self):
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(_request({}), _call_next())

        UUID(response.headers["X-Trace-Id"])

    async def test_reuses_incoming_trace_id(self):
        middleware = TraceMiddleware(app=MagicMock())
        request = _request({"X-Trace-Id": "trace-abc"})

        response = await middleware.dispatch(request, _call_next())

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert request.state.trace_id == "trace-abc"

    async def test_trace_id_visible_during_request_only(self):
        seen: dict[str, object] = {}

        async def call_next(request):
            seen["context"] = get_trace_id()
            seen["structlog"] = structlog.contextvars.get_contextvars().get(
                "trace_id"
            )
            response = MagicMock()
            response.headers = {}
            return response

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(_request({"X-Trace-Id": "trace-xyz"}), call_next)

        assert seen == {"context": "trace-xyz", "structlog": "trace-xyz"}
        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    async def test_context_is_reset_when_handler_raises(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await middleware.dispatch(_request({"X-Trace-Id": "t-1"}), call_next)

        assert get_trace_id() is None
