"""core/middleware.py — Custom ASGI middleware for the Event Service API.

Provides:
  - RequestIDMiddleware  : stamps every request with an ID (X-Request-ID header),
                           reusing the caller's ID when one is supplied
  - TimingMiddleware     : logs method, path, query, status, and duration per request

Both middleware classes use Starlette's BaseHTTPMiddleware and integrate with
the JSON logger configured in core/logging.py.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response.

    Sets:
      - request.state.request_id  — available to route handlers and exception handlers
      - X-Request-ID response header — visible to API clients for log correlation

    An incoming X-Request-ID (e.g. from a gateway) is kept so a request can be
    traced across services; otherwise a fresh UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status code, and wall-clock duration for every request.

    Reads request.state.request_id set by RequestIDMiddleware (must be added
    after TimingMiddleware so RequestID runs first).
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.info(
            "request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query or None,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
