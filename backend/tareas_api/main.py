"""Tareas API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TareasError → its own status and body
    - Logging configured once on startup via the lifespan context manager
    - run() refuses to start on a non-integer PORT (e.g. PORT="" → NaN)

Design Decisions:
    - Lifespan over @app.on_event
    - Startup failures logged as "Error al iniciar la aplicacion: <error>" and exit(1)
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tareas_api import __version__
from tareas_api.api.error_handlers import register_error_handlers
from tareas_api.api.routes import greeting, health, operaciones, rut
from tareas_api.config import Settings, get_settings
from tareas_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Tareas API started")
    yield
    logger.info("Tareas API shutting down")


def create_app() -> FastAPI:
    app = FastAPI(title="Tareas API", version=__version__, lifespan=lifespan)

    # Routes, registered explicitly
    app.include_router(greeting.router)
    app.include_router(rut.router)
    app.include_router(operaciones.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()


def listen_port(settings: Settings) -> int:
    """Validated listen port; raises ValueError for NaN or out-of-range values."""
    port = settings.port
    if not isinstance(port, int) or not 0 <= port <= 65535:
        raise ValueError(f"invalid PORT: {port!r}")
    return port


def run() -> None:
    """Console entrypoint: serve the app with uvicorn on the configured port."""
    try:
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_format)
        uvicorn.run(app, host="0.0.0.0", port=listen_port(settings), log_config=None)
    except Exception as e:
        logger.error(f"Error al iniciar la aplicacion: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
