from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from countyscope.api.deps import get_earth_engine
from countyscope.clients.earth_engine import ClientState, EarthEngineClient
from countyscope.core.exceptions import RemoteServiceError
from countyscope.main import app

api_url_prefix = "/api"


def get_county_feature(name: str, lon: float, lat: float) -> dict:
    return {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [
                [
                    [lon, lat],
                    [lon + 0.5, lat],
                    [lon + 0.5, lat + 0.25],
                    [lon, lat + 0.25],
                    [lon, lat],
                ]
            ],
        },
        "properties": {"COUNTY_NAM": name},
    }


@pytest.mark.anyio
async def test_list_regions(async_client: AsyncClient, earth_engine_client: MagicMock):
    earth_engine_client.get_info.return_value = ["Baringo", "Kisumu", "Nairobi"]

    response = await async_client.get(f"{api_url_prefix}/regions")

    assert response.status_code == 200
    assert response.json() == {"names": ["Baringo", "Kisumu", "Nairobi"]}


@pytest.mark.anyio
async def test_list_regions_sorted_remotely(
    async_client: AsyncClient, earth_engine_client: MagicMock, fake_ee: MagicMock
):
    earth_engine_client.get_info.return_value = []

    await async_client.get(f"{api_url_prefix}/regions")

    counties = fake_ee.FeatureCollection.return_value
    counties.aggregate_array.assert_called_once_with("COUNTY_NAM")
    counties.aggregate_array.return_value.sort.assert_called_once_with()


@pytest.mark.anyio
async def test_list_regions_remote_failure(
    async_client: AsyncClient, earth_engine_client: MagicMock
):
    earth_engine_client.get_info.side_effect = RemoteServiceError("boom")

    response = await async_client.get(f"{api_url_prefix}/regions")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch county list due to an internal server error."
    }


@pytest.mark.anyio
async def test_region_boundaries(
    async_client: AsyncClient, earth_engine_client: MagicMock
):
    feature_collection = {
        "type": "FeatureCollection",
        "features": [
            get_county_feature("Nairobi", 36.6, -1.45),
            get_county_feature("Kisumu", 34.5, -0.3),
        ],
    }
    earth_engine_client.get_info.side_effect = [
        feature_collection,
        ["Kisumu", "Nairobi"],
    ]

    response = await async_client.get(f"{api_url_prefix}/regions/geojson")

    assert response.status_code == 200
    body = response.json()
    assert body["countyList"] == ["Kisumu", "Nairobi"]
    nairobi = body["geojson"]["features"][0]["properties"]
    assert nairobi["COUNTY_NAM"] == "Nairobi"
    assert nairobi["bbox"] == pytest.approx([36.6, -1.45, 37.1, -1.2])
    assert nairobi["color"].startswith("#")


@pytest.mark.anyio
async def test_region_boundaries_remote_failure(
    async_client: AsyncClient, earth_engine_client: MagicMock
):
    earth_engine_client.get_info.side_effect = RemoteServiceError("quota exceeded")

    response = await async_client.get(f"{api_url_prefix}/regions/geojson")

    assert response.status_code == 500
    assert "quota exceeded" in response.json()["error"]


@pytest.mark.anyio
async def test_regions_not_ready(unready_client: AsyncClient):
    for path in ("/regions", "/regions/geojson"):
        response = await unready_client.get(f"{api_url_prefix}{path}")
        assert response.status_code == 503


@pytest.mark.anyio
async def test_ping_is_not_gated(unready_client: AsyncClient):
    response = await unready_client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"status": "up", "earth_engine": "uninitialized"}


@pytest.mark.anyio
async def test_list_regions_transport_failure_is_json(fake_ee: MagicMock):
    client = EarthEngineClient(key_path="unused.json", timeout=1.0)
    client.state = ClientState.READY
    names = fake_ee.FeatureCollection.return_value.aggregate_array.return_value.sort.return_value
    names.getInfo.side_effect = ConnectionError("socket closed")
    app.dependency_overrides[get_earth_engine] = lambda: client
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        ) as c:
            response = await c.get(f"{api_url_prefix}/regions")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {
        "error": "Failed to fetch county list due to an internal server error."
    }
