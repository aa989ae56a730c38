"""
HTTP middleware: access logging and security headers.

``AccessLogMiddleware`` writes one line per request to the
``taskboard_api.access`` logger.  Two formats are supported:

* ``tiny``: ``GET /card 200 42 - 1.23 ms``
* ``common``: the Common Log Format,
  ``127.0.0.1 - - [19/Oct/2026:10:00:00 +0000] "GET /card HTTP/1.1" 200 42``

``SecurityHeadersMiddleware`` adds a conservative set of security
headers to every response.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .logging_config import ACCESS_LOGGER_NAME

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

ACCESS_LOG_FORMATS = ("tiny", "common")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log every request in the ``tiny`` or ``common`` format."""

    def __init__(self, app, *, log_format: str = "common"):
        super().__init__(app)
        if log_format not in ACCESS_LOG_FORMATS:
            raise ValueError(f"Unknown access log format: {log_format}")
        self.log_format = log_format

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, Response(status_code=500), start)
            raise
        self._log(request, response, start)
        return response

    def _log(self, request: Request, response: Response, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        if self.log_format == "tiny":
            access_logger.info(format_tiny(request, response, elapsed_ms))
        else:
            access_logger.info(format_common(request, response))


def format_tiny(request: Request, response: Response, elapsed_ms: float) -> str:
    length = response.headers.get("content-length", "-")
    return f"{request.method} {request.url.path} {response.status_code} {length} - {elapsed_ms:.2f} ms"


def format_common(request: Request, response: Response) -> str:
    host = request.client.host if request.client else "-"
    timestamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    length = response.headers.get("content-length", "-")
    return (
        f'{host} - - [{timestamp}] "{request.method} {target} HTTP/{http_version}" '
        f"{response.status_code} {length}"
    )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds security headers to all HTTP responses."""

    def __init__(
        self,
        app,
        *,
        hsts_max_age: int = 15552000,  # 180 days
        referrer_policy: str = "no-referrer",
    ):
        super().__init__(app)
        self.hsts_max_age = hsts_max_age
        self.referrer_policy = referrer_policy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers["Strict-Transport-Security"] = f"max-age={self.hsts_max_age}; includeSubDomains"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["X-DNS-Prefetch-Control"] = "off"
        response.headers["Referrer-Policy"] = self.referrer_policy
        response.headers["Cross-Origin-Opener-Policy"] = "same-origin"
        return response
