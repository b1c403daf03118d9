"""Integration test fixtures for Coral.

Provides an async HTTP client against the FastAPI app with the
process-wide session controller replaced by one wired to a mock STT.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.services import session as session_service


@pytest.fixture
def app():
    """Create a fresh FastAPI application instance."""
    return create_app()


@pytest.fixture
async def async_client(app, controller):
    """AsyncClient whose session routes use the test controller."""
    session_service._controller = controller
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    session_service.reset_controller()
