"""
Contactbook — Request Logging Middleware
=========================================

What:  One access-log line per HTTP request: method, path, status, duration.
How:   Times the downstream call and logs on the `contactbook.access` logger,
       choosing the level from the status class.
When:  Inside RequestIDMiddleware, so the request ID is already set.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, client IP, request ID
    ❌ Don't log: form bodies (names, email addresses, notes)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from contactbook.middleware.request_id import current_request_id

logger = logging.getLogger("contactbook.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logged information:
        - Request: method, path, client IP
        - Response: status code, duration in milliseconds
        - Correlation: request ID from RequestIDMiddleware

    Health checks are not logged.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = current_request_id()

        if path == "/health":
            return await call_next(request)

        try:
            response = await call_next(request)
        except Exception:
            # The app-level handler turns this into the 500 response
            self._log_access(method, path, 500, start_time, rid, client_ip)
            raise

        self._log_access(method, path, response.status_code, start_time, rid, client_ip)
        return response

    @staticmethod
    def _log_access(method, path, status, start_time, rid, client_ip) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000

        # 5xx → ERROR, 4xx → WARNING, 2xx/3xx → INFO
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
