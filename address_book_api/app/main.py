"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application, sets up logging, CORS
and the API router.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``::

    uvicorn address_book_api.app.main:app --port 8080

The MongoDB client is created once when the application starts and
closed when it shuts down.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .core.db import close_db, init_db
from .api.router import router as api_router

CORS_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOWED_HEADERS = [
    "Access-Control-Allow-Headers",
    "Authorization",
    "Access-Control-Allow-Method",
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Credentials",
    "Content-Type",
]


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages are not lost.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Starting...")
        init_db()
        logger.info("Server is running on http://127.0.0.1:%s", settings.http_port)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
