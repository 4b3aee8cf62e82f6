"""
Main entrypoint for the Pitch Planner API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  ``create_app`` builds and configures the
app, which is then instantiated at import time as ``app``, so it can
be served with::

    uvicorn pitch_planner_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the API under ``/api`` and registers a
    startup hook that applies database migrations.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


app = create_app()
