"""
Main entrypoint for the Software Engineers API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory store, registers error handlers and includes
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn or another
ASGI server, e.g.::

    uvicorn software_engineers_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .repositories.software_engineer_repository import SoftwareEngineerRepository

API_V1_PREFIX = "/api/v1"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds a new ``SoftwareEngineerRepository``, so separate
    applications never share state.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings

    # Initialise logging before anything else so that the steps below
    # can safely log messages.  ``debug`` only raises verbosity; it is
    # not passed to FastAPI, whose debug mode replaces the 500 handler
    # with a traceback page.
    log_level = "DEBUG" if app_settings.debug else app_settings.log_level
    setup_logging(log_level, app_settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
    )
    app.state.settings = app_settings

    repository = SoftwareEngineerRepository()
    if app_settings.seed_demo_data:
        seeded = repository.seed_demo_data()
        logger.info("Seeded %d demo software engineers", len(seeded))
    app.state.software_engineer_repository = repository

    register_exception_handlers(app)

    app.include_router(v1_router, prefix=API_V1_PREFIX)

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> dict:
        return {
            "status": "ok",
            "engineers": request.app.state.software_engineer_repository.count(),
        }

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
