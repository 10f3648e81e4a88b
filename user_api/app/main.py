"""
Main entrypoint for the User API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn user_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Store handle shared by all requests.  When omitted, the file
        database named by ``settings.database_url`` is used.  Tests pass
        an in‑memory handle here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    owns_database = database is None
    app.state.database = Database.from_settings() if owns_database else database

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        app.state.database.init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # A handle passed in by the caller outlives the app.
        if owns_database:
            app.state.database.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
