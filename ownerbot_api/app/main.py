"""
Main entrypoint for the Ownerbot API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn ownerbot_api.app.main:app --reload

The chat webhook is reachable both at ``/api/v1/chat/`` and at the
root path, which is what chat platforms are usually pointed at.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.db import init_db
from .api.v1.router import router as v1_router
from .api.v1.endpoints import chat


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(chat.router, tags=["chat"])

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and applies migrations.
        init_db()

    return app


app = create_app()
