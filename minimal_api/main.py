"""Minimal API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiError → problem-details JSON responses
    - Store initialized (and tables created) on startup via lifespan

Run with::

    uvicorn minimal_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import minimal_api.infrastructure.database as db_module
from minimal_api.api.error_handlers import register_error_handlers
from minimal_api.api.routes import health, todo_items
from minimal_api.config import Settings, get_settings
from minimal_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = db_module.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        await manager.create_all()
        logger.info(f"{settings.app_name} started")
        yield
        await manager.dispose()
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(todo_items.router)

    register_error_handlers(app)
    return app


app = create_app()
