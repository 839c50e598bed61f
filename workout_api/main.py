"""Workout API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WorkoutApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Mongo client opened on startup and closed on shutdown via lifespan;
      it lives on app.state, never in a module global

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers in api/error_handlers.py keep this module's imports small

Run with: uvicorn workout_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workout_api import __version__
from workout_api.api.error_handlers import register_error_handlers
from workout_api.api.routes import health, workouts
from workout_api.config import get_settings
from workout_api.infrastructure.database import DatabaseManager
from workout_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseManager(
        settings.mongodb_url,
        settings.mongodb_database,
        server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
    )
    logger.info("Workout API started")
    yield
    logger.info("Workout API shutting down")
    app.state.db_manager.close()
    app.state.db_manager = None


def create_app() -> FastAPI:
    """Build the application with middleware, routes and error handlers."""
    settings = get_settings()
    application = FastAPI(
        title="Workout API",
        description="API for managing workouts",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(health.router)
    application.include_router(workouts.router)
    register_error_handlers(application)
    return application


app = create_app()
