"""Error Handlers: global exception handlers for the calculator API.

Invariants:
    - CalculatorError → {"error": message} with the error's own status
    - Starlette HTTPException (404, 405) → {"error": detail}, same status and headers
    - Exception (catch-all) → 500, never leaks internal details
    - Every handler answers with Content-Type: application/json

Design Decisions:
    - Three-layer handler: domain (CalculatorError), framework (HTTPException), catch-all (Exception)
    - Kept out of main.py so create_app() stays a list of explicit registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calculator_api.core.errors import CalculatorError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_calculator_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_calculator_error_handler(app: FastAPI) -> None:
    """Register validation/domain error handler."""

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        """Handle all calculator validation and domain errors."""
        logger.debug(
            f"CalculatorError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
