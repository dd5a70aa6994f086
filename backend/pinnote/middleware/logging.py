"""
Pinnote Backend: Request Logging Middleware
=============================================

What:  One access-log line per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration, request id, note id (on the id-addressed
       routes) and client IP on the `pinnote.access` logger.

Level by status:
    5xx → ERROR
    4xx → WARNING
    else → INFO

Request bodies are never logged; notes may hold personal text.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from pinnote.middleware.request_id import request_id_var

logger = logging.getLogger("pinnote.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        # Health probes run every few seconds
        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        # Filled in by the router once the route has matched
        note_id = request.scope.get("path_params", {}).get("note_id")

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] note=%s from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            note_id or "-",
            client_ip,
            extra={
                "request_id": rid,
                "note_id": note_id,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
