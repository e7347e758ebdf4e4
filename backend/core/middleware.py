"""core/middleware.py — Custom ASGI middleware for the Event Manager API.

Provides:
  - RequestIDMiddleware  : stamps every request with an ID (X-Request-ID header)
                           and turns unhandled exceptions into a JSON 500
  - TimingMiddleware     : access log line with method, path, status, duration

Both use Starlette's BaseHTTPMiddleware and log through the JSON logger
configured in core/logging.py.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_INBOUND_ID_LENGTH = 128


def error_response(status_code: int, error, request_id, headers=None) -> JSONResponse:
    """The JSON error envelope shared by every non-2xx response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "status_code": status_code,
            "request_id": request_id,
        },
        headers=headers,
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response.

    An inbound X-Request-ID from a proxy is kept so log lines can be
    correlated across hops; otherwise a fresh UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        inbound = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if inbound and len(inbound) <= _MAX_INBOUND_ID_LENGTH:
            request_id = inbound
        else:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "unhandled exception",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "error": str(exc),
                },
                exc_info=True,
            )
            response = error_response(500, "Internal server error", request_id)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """One access log line per request.

    Must be added before RequestIDMiddleware so it runs inside it and can
    read request.state.request_id.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
