"""Task Board API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); fallback router last
    - Global error handlers map TaskBoardError → {"message": ...} responses
    - CORS configured from settings (not hardcoded)
    - In-memory store initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() wraps uvicorn so the console script honors HOST/PORT settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.path_normalization import TrailingSlashMiddleware
from taskboard.infrastructure.memory_store import init_store
from taskboard.infrastructure.observability import setup_logging
from taskboard.config import get_settings
from taskboard.api.routes import boards, tasks, health, fallback

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(seed=settings.seed_demo_data)
    logger.info("Task Board API started")
    yield
    logger.info("Task Board API shutting down")


app = FastAPI(
    title="Task Board API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TrailingSlashMiddleware)

# Routes — explicit registration; fallback MUST stay last
app.include_router(health.router)
app.include_router(boards.router)
app.include_router(tasks.router)
app.include_router(fallback.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API with uvicorn (single process, single worker)."""
    uvicorn.run(app, host=settings.host, port=settings.port)
