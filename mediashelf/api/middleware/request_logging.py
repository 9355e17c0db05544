"""
Request Logging Middleware

Logs one line per request with method, path, status and duration, and
binds a request_id to the structlog context so every log line emitted
while handling the request carries it.

The id comes from the X-Request-ID header when the client sends one and
is echoed back in the response.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mediashelf.shared.core.logging import clear_log_context, get_logger, log_context


REQUEST_ID_HEADER = "X-Request-ID"

request_logger = get_logger("http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id and log each request once it completes."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            request_logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            clear_log_context()
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        request_logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        clear_log_context()
        return response
