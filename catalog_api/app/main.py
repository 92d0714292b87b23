"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the resource routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn catalog_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.db import init_db
from .core.error_handlers import register_exception_handlers
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create the products table if it does not exist yet.
    init_db()
    yield


def create_app(initialise_db: bool = True) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    initialise_db : bool
        Create the database tables on startup.  Tests that provide their
        own database through dependency overrides pass ``False``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup code can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan if initialise_db else None,
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
