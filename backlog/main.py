"""Agent Backlog API — FastAPI application factory and server entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BacklogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one DatabaseSessionManager per app, disposed on shutdown
    - Invalid configuration aborts startup before any request is served

Design Decisions:
    - create_app(settings) factory over a module-level app: importing the module
      never reads the environment, and tests pass their own Settings
    - Lifespan over @app.on_event: cleaner shutdown of the engine pool
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backlog.api.error_handlers import register_error_handlers
from backlog.api.routes import health, tools
from backlog.config import Settings, load_settings
from backlog.core.errors import ConfigurationError
from backlog.infrastructure.database import DatabaseSessionManager
from backlog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API. Raises ConfigurationError when settings are invalid."""
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.store_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Agent Backlog API started")
        yield
        logger.info("Agent Backlog API shutting down")
        await db_manager.dispose()

    app = FastAPI(title="Agent Backlog API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(tools.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entry point: validate configuration, then serve with uvicorn."""
    import uvicorn

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(e.message, extra={"error_code": e.code})
        raise SystemExit(1) from e
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
