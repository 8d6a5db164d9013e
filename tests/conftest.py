import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

os.environ["ENV_STATE"] = "test"
from countyscope.api.deps import get_earth_engine
from countyscope.clients.earth_engine import EarthEngineClient
from countyscope.main import app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def earth_engine_client() -> MagicMock:
    """A ready client whose remote calls are AsyncMocks."""
    client = MagicMock(spec=EarthEngineClient)
    client.is_ready = True
    client.get_info = AsyncMock()
    client.get_map_id = AsyncMock()
    client.get_download_url = AsyncMock()
    return client


@pytest.fixture()
def fake_ee():
    """Replaces the ``ee`` module used to build expressions in the services."""
    mocked = MagicMock(name="ee")
    with (
        patch("countyscope.services.regions.ee", mocked),
        patch("countyscope.services.imagery.ee", mocked),
    ):
        yield mocked


@pytest.fixture()
async def async_client(earth_engine_client, fake_ee) -> AsyncGenerator:
    app.dependency_overrides[get_earth_engine] = lambda: earth_engine_client
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
async def unready_client() -> AsyncGenerator:
    """Client against the real, never-initialized Earth Engine singleton."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as c:
        yield c
