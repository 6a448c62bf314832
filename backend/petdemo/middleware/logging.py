"""
PetDemo: Access Log Middleware
==============================

What:  One log line per request: method, path, status, duration, request id.
How:   Level follows the status class so store failures (5xx) stand out:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
       /health and static assets are not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from petdemo.middleware.request_id import request_id_var

logger = logging.getLogger("petdemo.access")

QUIET_PREFIXES = ("/health", "/assets/")


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path.startswith(QUIET_PREFIXES):
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            request_id_var.get(""),
            client_ip,
        )

        return response
