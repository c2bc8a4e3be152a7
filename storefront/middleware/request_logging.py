"""Request logging middleware — one log line per request with status and latency."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("storefront.requests")

# Methods that mutate state are logged at INFO, reads at DEBUG
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, query, status and duration of every request.

    Server errors are logged at ERROR regardless of method.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if response.status_code >= 500:
            level = logging.ERROR
        elif request.method in _WRITE_METHODS or response.status_code >= 400:
            level = logging.INFO
        else:
            level = logging.DEBUG

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.log(
            level,
            "%s %s → %s (%sms) tenant=%s",
            request.method,
            path,
            response.status_code,
            duration_ms,
            request.headers.get("x-client-id", "-"),
        )
        return response
