"""
Shared-secret authentication for protected routes.

Every route except the root greeting requires an ``Authorization``
header whose second whitespace-delimited segment equals the
configured ``api_token`` (normally ``Bearer <token>``).  The check is
implemented as a middleware so that it runs before routing and body
parsing: an unauthenticated request is answered with HTTP 401 whether
or not its path matches a route and whatever its body contains.
Rejected requests are logged with their path.
"""

import hmac
import logging
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import Settings
from .errors import UnauthorizedError

logger = logging.getLogger(__name__)

PUBLIC_PATHS = ("/",)


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token segment of an Authorization header, if any."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def is_valid_token(authorization: Optional[str], api_token: str) -> bool:
    """Check an Authorization header value against the configured token.

    An empty ``api_token`` never validates, so a deployment without a
    configured secret rejects every protected request.
    """
    if not api_token:
        return False
    token = extract_token(authorization)
    if token is None:
        return False
    return hmac.compare_digest(token.encode("utf-8"), api_token.encode("utf-8"))


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Reject requests to protected paths that lack the shared bearer token."""

    def __init__(self, app, *, public_paths: Iterable[str] = PUBLIC_PATHS):
        super().__init__(app)
        self.public_paths = frozenset(public_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.public_paths:
            return await call_next(request)
        settings: Settings = request.app.state.settings
        if not is_valid_token(request.headers.get("Authorization"), settings.api_token):
            logger.error("Unauthorized request to path: %s", request.url.path)
            exc = UnauthorizedError()
            return JSONResponse(status_code=exc.http_status, content=exc.to_response())
        return await call_next(request)
