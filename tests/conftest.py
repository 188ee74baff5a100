"""Shared fixtures: a fresh, seeded app per test."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from blog_api.main import create_app
from blog_api.settings import Settings


@pytest.fixture
def app() -> FastAPI:
    """Create an app with its own seeded in-memory database."""
    return create_app(Settings(seed_data=True))


@pytest.fixture
async def client(app: FastAPI):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
