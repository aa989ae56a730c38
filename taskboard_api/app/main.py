"""
Main entrypoint for the Taskboard API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory store, installs middleware and error handlers
and includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn taskboard_api.app.main:app --reload

Tests build isolated applications by passing their own ``Settings``
to ``create_app``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.error_handlers import ErrorBoundaryMiddleware, register_error_handlers
from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import AccessLogMiddleware, SecurityHeadersMiddleware
from .core.security import BearerTokenMiddleware
from .core.store import BoardStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level defaults read
        from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own empty
        (or demo-seeded) store.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None, access_level=settings.access_log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = BoardStore()
    if settings.seed_demo_data:
        app.state.store.seed_demo_data()
        logger.info("Store seeded with demo data")

    if not settings.api_token:
        logger.warning("API_TOKEN is not set; every protected request will be rejected")

    # Middleware added last runs first: CORS, security headers, access
    # log, error boundary, then the token check closest to the routes.
    app.add_middleware(BearerTokenMiddleware)
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(
        AccessLogMiddleware,
        log_format="tiny" if settings.is_production else "common",
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
