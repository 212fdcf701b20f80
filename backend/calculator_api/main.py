"""Calculator API: FastAPI application entry point.

Invariants:
    - Settings loaded once and passed into create_app(), never read inside handlers
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CalculatorError → {"error": message} JSON responses
    - Logging configured on startup via lifespan context manager

Usage:
    uvicorn calculator_api.main:app
    python -m calculator_api
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calculator_api.api.error_handlers import register_error_handlers
from calculator_api.api.routes import calculator, health
from calculator_api.config import Settings, get_settings
from calculator_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Calculator API started")
        yield
        logger.info("Calculator API shutting down")

    app = FastAPI(title=settings.app_title, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    register_error_handlers(app)

    health.register_health_route(app)
    app.include_router(calculator.router)

    return app


app = create_app()
