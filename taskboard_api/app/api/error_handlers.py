"""
Global exception handlers for the Taskboard API.

Three layers are registered:

* ``TaskboardError`` subclasses become ``{"error": message}`` with the
  status carried by the exception (400, 401 or 404).
* ``RequestValidationError`` (malformed JSON, wrongly typed fields)
  becomes 400 ``{"error": "Invalid data"}``.
* Any other exception becomes a 500.  In production the body is a
  fixed ``{"error": {"message": "server error"}}``; otherwise it carries
  the message, exception type and traceback.

Unhandled exceptions are turned into the 500 response by
``ErrorBoundaryMiddleware``, which sits inside the access log and
security headers middleware so those apply to failed requests too.
The ``Exception`` handler only sees errors raised by the outer
middleware themselves.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from taskboard_api.app.core.errors import TaskboardError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_taskboard_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_taskboard_error_handler(app: FastAPI) -> None:
    @app.exception_handler(TaskboardError)
    async def taskboard_error_handler(request: Request, exc: TaskboardError):
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return server_error_response(request, exc)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Turn exceptions escaping the routes into a 500 response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return server_error_response(request, exc)


def server_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and build its 500 response."""
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_server_error_response(exc, production=request.app.state.settings.is_production),
    )


def build_server_error_response(exc: Exception, production: bool) -> dict:
    """Build the body of a 500 response, hiding details in production."""
    if production:
        return {"error": {"message": "server error"}}
    return {
        "message": str(exc),
        "error": {
            "type": type(exc).__name__,
            "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
        },
    }
