import asyncio
import json
from unittest.mock import patch

import pytest

from countyscope.clients.earth_engine import EarthEngineClient
from countyscope.core.exceptions import CredentialsError
from countyscope.main import app, lifespan


@pytest.mark.anyio
async def test_missing_key_aborts_startup(tmp_path):
    client = EarthEngineClient(key_path=tmp_path / "missing.json")

    with (
        patch("countyscope.main.earth_engine", client),
        patch("countyscope.main.configure_logging"),
    ):
        with pytest.raises(CredentialsError):
            async with lifespan(app):
                pass

    assert not client.is_ready


@pytest.mark.anyio
async def test_startup_initializes_in_background(tmp_path):
    key_file = tmp_path / "key.json"
    key_file.write_text(
        json.dumps({"client_email": "relay@example-project.iam.gserviceaccount.com"})
    )
    client = EarthEngineClient(key_path=key_file)

    with (
        patch("countyscope.main.earth_engine", client),
        patch("countyscope.main.configure_logging"),
        patch("countyscope.clients.earth_engine.ee") as mocked_ee,
    ):
        async with lifespan(app):
            for _ in range(100):
                if client.is_ready:
                    break
                await asyncio.sleep(0.01)

    assert client.is_ready
    mocked_ee.Initialize.assert_called_once()
