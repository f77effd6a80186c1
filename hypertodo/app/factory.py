"""
Application factory - creates and configures the FastAPI application.
This isolates all initialization logic from main.py.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from hypertodo import __version__
from hypertodo.adapters.http_framework import HTTPFrameworkAdapter
from hypertodo.api.routes.health import router as health_router
from hypertodo.api.routes.pages import router as pages_router
from hypertodo.api.routes.todos import router as todos_router
from hypertodo.dependencies.services import ServiceContainer
from hypertodo.exceptions.handlers import setup_exception_handlers
from hypertodo.middleware.logging_setup import setup_logging
from hypertodo.middleware.setup import setup_middleware

http_adapter = HTTPFrameworkAdapter()


@asynccontextmanager
async def lifespan(app):
    """Close the storage opened by create_app() when the server stops."""
    logger = logging.getLogger(__name__)
    logger.info("Application starting up...")

    yield

    logger.info("Application shutting down...")
    app.state.services.close()
    logger.info("Shutdown complete")


def create_app(db_path: Optional[str] = None):
    """
    Create and configure the FastAPI application.

    Args:
        db_path: SQLite file to use. Defaults to TODO_DB_PATH or sqlite.db.

    Returns:
        Configured FastAPI app instance ready to run.
    """
    # Setup logging first (must be done before creating logger)
    setup_logging()
    logger = logging.getLogger(__name__)

    app_adapter = http_adapter.create_app(
        title="hypertodo",
        description="Server-rendered to-do list for htmx front ends",
        version=__version__,
        lifespan=lifespan
    )

    # Storage is opened here so the app is usable with or without lifespan events
    services = ServiceContainer(db_path)
    app_adapter.set_state("services", services)

    setup_middleware(app_adapter)
    setup_exception_handlers(app_adapter)

    app_adapter.include_router(pages_router)
    app_adapter.include_router(todos_router)
    app_adapter.include_router(health_router)

    logger.info(f"FastAPI app created (storage: {services.db_path})")
    return app_adapter.app
