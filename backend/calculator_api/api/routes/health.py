"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - /health answers every method (including TRACE and non-standard ones) with 200
      and a fixed plaintext body
    - No validation, no JSON, no dependency checks

Design Decisions:
    - Plain Starlette route with methods=None: APIRoute needs a finite method list
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

HEALTH_PATH = "/health"
HEALTH_MESSAGE = "API is running fine"


async def health_check(request: Request) -> PlainTextResponse:
    """Basic liveness probe. Returns 200 if the process is up."""
    return PlainTextResponse(HEALTH_MESSAGE, status_code=status.HTTP_200_OK)


def register_health_route(app: FastAPI) -> None:
    app.add_route(HEALTH_PATH, health_check, methods=None, include_in_schema=False)
