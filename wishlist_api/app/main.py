"""
Main entrypoint for the Wishlist API.

This module assembles the FastAPI application, sets up logging, the
error boundary and versioned routers.  ``create_app`` builds and
configures an app from explicit settings and stores; a default
instance backed by SQLite is created at module import time as
``app``, so the service can be run with::

    uvicorn wishlist_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import init_db
from .core.errors import DuplicateEntryError, WishlistError
from .core.logging_config import setup_logging
from .core.responses import CORS_HEADERS, json_response
from .services.wishlist_service import WishlistService
from .stores.base import Stores
from .stores.sqlite import build_sqlite_stores

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, stores: Optional[Stores] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this application.  Defaults to the settings
        read from the environment.
    stores : Optional[Stores]
        Catalog, wishlist and notification stores.  When omitted, SQLite
        stores are built from ``settings`` and the database schema is
        migrated on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    use_sqlite = stores is None
    if use_sqlite:
        stores = build_sqlite_stores(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.wishlist_service = WishlistService(settings, stores)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(WishlistError)
    async def wishlist_error_handler(request: Request, exc: WishlistError):
        if isinstance(exc, DuplicateEntryError):
            logger.info("Duplicate wishlist add on %s", request.url.path)
        return json_response(exc.status_code, {"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
        response = json_response(exc.status_code, {"message": message})
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    # Single boundary for everything the handlers above do not cover.
    # Exception text is only returned to the caller in debug mode.
    @app.middleware("http")
    async def error_boundary(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("WISHLIST ERROR: %s %s", request.method, request.url.path)
            message = str(exc) if settings.debug and str(exc) else "Internal server error"
            return json_response(500, {"message": message})
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

    if use_sqlite:
        @app.on_event("startup")
        async def startup_event() -> None:
            init_db(settings)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
