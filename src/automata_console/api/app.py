"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from automata_console import __version__
from automata_console.api.handler import AutomataHandler
from automata_console.api.routes import router
from automata_console.config import Settings, settings as default_settings
from automata_console.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _configure_lifecycle_events(app: FastAPI) -> None:
    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Starting up Automata Console API")
        logger.info("  POST /api/automata - classify a task description")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Shutting down Automata Console API")


def create_app(
    config: Optional[Settings] = None,
    handler: Optional[AutomataHandler] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use; defaults to the process-wide settings
        handler: Pre-built request handler, e.g. with a seeded random source

    Returns:
        Configured FastAPI application
    """
    if config is not None:
        configure_logging(config)
    config = config or default_settings
    app = FastAPI(
        title="Automata Console",
        description="Keyword-based task intent classification demo API",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.handler = handler or AutomataHandler(config)
    app.include_router(router)
    _configure_lifecycle_events(app)

    return app
