"""Integration test fixtures for the ASGI application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from socialid.api.app import create_app
from socialid.client import SocialIdClient
from socialid.config import SocialIdSettings

# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Mock outbound RPC and API traffic; in-process ASGI calls are untouched."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
async def test_app(mock_settings: SocialIdSettings) -> AsyncIterator[FastAPI]:
    """
    Create the application with an initialized client in app state.

    ASGITransport does not run the lifespan, so the client is opened here.
    """
    app = create_app(mock_settings)

    async with SocialIdClient(mock_settings) as client:
        app.state.socialid_client = client
        yield app

    app.state.socialid_client = None


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
