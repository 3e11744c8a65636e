"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly
    - Global error handlers map ExerciseTrackerError → {"message", ...} JSON responses
    - The database manager is created in the lifespan and lives on app.state
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercises, health, pages
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info("Exercise tracker API started")
    yield
    logger.info("Exercise tracker API shutting down")
    await db_manager.dispose()
    app.state.db_manager = None


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(exercises.router)
    app.mount("/public", StaticFiles(directory=pages.PUBLIC_DIR), name="public")
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
