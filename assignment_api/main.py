"""Assignment API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AssignmentError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Default Evaluator warmed in lifespan so the registry is built once at
      process start, not on the first request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assignment_api.api.error_handlers import register_error_handlers
from assignment_api.api.routes import assignment, health, index
from assignment_api.config import get_settings
from assignment_api.core.evaluate import get_default_evaluator
from assignment_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    evaluator = get_default_evaluator()
    logger.info(
        f"Assignment API started with substitutions: "
        f"{', '.join(evaluator.registry.names())}",
    )
    yield
    logger.info("Assignment API shutting down")


app = FastAPI(
    title="Assignment API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(index.router)
app.include_router(health.router)
app.include_router(assignment.router)

register_error_handlers(app)
