"""
Healthy Breakfast Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── app: Fresh FastAPI instance from create_app()
    ├── test_client: HTTPX AsyncClient bound to the module-level app
    └── app_client: HTTPX AsyncClient bound to the fresh `app` fixture
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"


@pytest.fixture
def app():
    """
    A freshly built application.

    Why: Tests that register extra routes must not leak them into other tests.
    """
    from breakfast_backend.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from breakfast_backend.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def app_client(app):
    """
    Client for the `app` fixture.

    raise_app_exceptions=False lets tests inspect the 500 response the
    server error handler sends instead of having the exception re-raised.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
