"""
Main entrypoint for the Organiks Farm Records API.

This module assembles the FastAPI application, sets up logging, opens
the record repository and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn organiks_api.app.main:app --reload
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI

from .api.responses import RecordJSONResponse
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .store.repository import Repository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, repository: Optional[Repository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings.
    repository : Optional[Repository]
        An already opened repository.  When given, the application uses
        it as is and leaves closing it to the caller.  Otherwise a
        repository on ``settings.database_url`` is opened at startup and
        closed at shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=RecordJSONResponse,
    )
    app.state.repository = repository

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Opening the repository creates the database file if needed
        # and applies pending migrations.
        if app.state.repository is None:
            app.state.repository = Repository(settings.database_url)
            app.state.owns_repository = True
            logger.info("Serving records from %s", settings.database_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if getattr(app.state, "owns_repository", False):
            app.state.repository.close()
            app.state.repository = None
            app.state.owns_repository = False

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok", "version": settings.api_version}

    return app


app = create_app()
