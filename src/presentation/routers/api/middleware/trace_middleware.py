"""Trace middleware to inject a trace_id per request.

- Reuses an incoming X-Trace-Id header or generates a new id
- Exposes the id via get_trace_id(), request.state.trace_id and the
  structlog context (so every log line of the request carries it)
- Echoes the id in the X-Trace-Id response header
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside of a request."""
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set the trace ID for the duration of the request.

        Args:
            request: Incoming request.
            call_next: Next handler.

        Returns:
            Response with X-Trace-Id header added.
        """
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        token = trace_id_context.set(trace_id)
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("trace_id")
            trace_id_context.reset(token)
