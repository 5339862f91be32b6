"""Request context middleware.

- Assigns a trace_id per request (X-Trace-Id header in and out)
- Records the request start time in epoch milliseconds on ``request.state``
  so error envelopes can carry a timestamp later than the request start
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that stamps each request with trace ID and start time."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Record request context, then propagate the trace ID to the response.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with X-Trace-Id header added.
        """
        trace_id = request.headers.get("X-Trace-Id") or str(uuid4())
        request.state.trace_id = trace_id
        request.state.started_at_ms = now_millis()
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response
