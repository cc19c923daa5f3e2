"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from wbcalc.api.app import app
from wbcalc.catalog.catalog import AircraftCatalog


@pytest.fixture
def test_app():
    """FastAPI app with the built-in catalog on app.state."""
    # ASGITransport does not run the lifespan, so the catalog is set here
    app.state.catalog = AircraftCatalog.builtin()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
