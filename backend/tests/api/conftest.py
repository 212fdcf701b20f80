"""API test fixtures: app built from explicit Settings + async HTTP client.

Invariants:
    - Every test gets a fresh app from create_app(), never the module-level instance
    - Settings built with _env_file=None so a local .env cannot leak into tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from calculator_api.config import Settings
from calculator_api.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_level="DEBUG", log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client over ASGI, no network."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
