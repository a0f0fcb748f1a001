"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database opened on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup
    - Static front-end mounted AFTER API routes so /api/* takes precedence

Run locally with:
    uvicorn exercise_tracker.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import health, users
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import close_db, init_db
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Exercise Tracker API started")
    yield
    await close_db()
    logger.info("Exercise Tracker API shut down")


app = FastAPI(
    title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

# html=True serves index.html at "/"
if os.path.isdir(settings.static_path):
    app.mount(
        "/", StaticFiles(directory=settings.static_path, html=True), name="static",
    )

register_error_handlers(app)
