"""
Healthy Breakfast Backend — Request Logging Middleware
======================================================

What:  One access log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address.
When:  Runs inside RequestIDMiddleware so the request id is already set.

Log line:
    GET /api/menu 200 1.3ms [a1b2c3d4] from 127.0.0.1

Request bodies and headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from breakfast_backend.middleware.request_id import request_id_var

logger = logging.getLogger("breakfast_backend.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    return logging.WARNING if status >= 400 else logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request at the level level_for_status() picks.

    The liveness path is skipped; probes hit it every few seconds.
    """

    QUIET_PATHS = {"/"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s",
            fields,
            extra=fields,
        )
        return response
