"""Trace middleware to inject a trace_id and request_id per request.

- Adds X-Trace-Id response header (honours an incoming X-Trace-Id)
- Echoes X-Request-Id, minting one when the client sent none
- Binds both ids into structlog contextvars so every log line of the
  request carries them
- Exposes get_trace_id() helper for code outside request handlers
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_ID_HEADER = "X-Trace-Id"
REQUEST_ID_HEADER = "X-Request-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID.

    Returns None when called outside of request context.

    Returns:
        str | None: The current request trace ID, or None if no active request.
    """
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects trace and request IDs into each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Intercept a request to set and propagate its IDs.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with X-Trace-Id and X-Request-Id headers added.
        """
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid4())
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.trace_id = trace_id
        request.state.request_id = request_id
        token = trace_id_context.set(trace_id)
        try:
            with structlog.contextvars.bound_contextvars(
                trace_id=trace_id, request_id=request_id
            ):
                response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            # Clear context after request to prevent leakage
            trace_id_context.reset(token)
