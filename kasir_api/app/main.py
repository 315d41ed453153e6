"""
Main entrypoint for the Kasir API.

This module assembles the FastAPI application: it sets up logging,
builds the product store selected by ``Settings.storage_backend``,
wires repository, service and routers together, and registers the
exception handlers.  ``create_app`` builds and configures the app.
It is not instantiated at import time because a required database
that fails to open must stop the process from ``run`` rather than
break the import; use uvicorn's factory mode instead::

    uvicorn kasir_api.app.main:create_app --factory --port 8080

``run`` starts uvicorn on ``HOST:PORT`` and is what ``run.py`` and the
``kasir-api`` console script call.
"""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from uvicorn import Config, Server

from .api.router import degraded_router, router
from .core.config import STORAGE_DATABASE, STORAGE_MEMORY, Settings, load_settings, settings as default_settings
from .core.db import init_db
from .core.error_handlers import register_exception_handlers
from .core.exceptions import DatabaseUnavailableError
from .core.logging_config import resolve_level, setup_logging
from .repositories.product_repository import (
    InMemoryProductRepository,
    ProductRepository,
    SQLiteProductRepository,
)
from .services.product_service import ProductService

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> Optional[ProductRepository]:
    """Create the product store for ``settings``.

    Returns ``None`` when the database backend is selected, the
    database cannot be initialised and ``db_required`` is false.

    Raises
    ------
    DatabaseUnavailableError
        If the database cannot be initialised and ``db_required`` is
        true.
    ValueError
        If ``storage_backend`` names an unknown backend.
    """
    if settings.storage_backend == STORAGE_MEMORY:
        logger.info("Using in-memory product store")
        return InMemoryProductRepository()
    if settings.storage_backend != STORAGE_DATABASE:
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.storage_backend!r}")

    logger.debug("DB_CONN: %s", settings.db_conn)
    try:
        db_path = init_db(settings.db_conn)
    except DatabaseUnavailableError as exc:
        if settings.db_required:
            logger.error("Failed to initialize database: %s", exc)
            raise
        logger.warning("Database unavailable, serving 503 on product routes: %s", exc)
        return None
    logger.info("Using SQLite product store at %s", db_path)
    return SQLiteProductRepository(db_path)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment when ``core.config`` was imported.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  When the database
        is unavailable and not required, the catalog routes answer 503.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    register_exception_handlers(app)

    repository = build_repository(settings)
    if repository is None:
        app.state.product_service = None
        app.include_router(degraded_router)
    else:
        app.state.product_service = ProductService(repository)
        app.include_router(router)
    return app


def run() -> None:
    """Serve the application with uvicorn.  Exits with status 1 if startup fails."""
    settings = load_settings()
    try:
        application = create_app(settings)
    except DatabaseUnavailableError:
        sys.exit(1)
    logger.info("Server running di %s", settings.bind_address)
    # log_config=None keeps uvicorn from replacing the handlers setup_logging installed.
    config = Config(
        app=application,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=resolve_level(settings.log_level),
    )
    Server(config).run()

