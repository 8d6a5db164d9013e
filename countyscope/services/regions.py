"""County lookups against the Earth Engine county collection."""

import logging
from typing import Any

import ee

from countyscope.clients.earth_engine import EarthEngineClient
from countyscope.constants.enhancements import REGION_PALETTE
from countyscope.core.config import config
from countyscope.core.exceptions import RegionNotFoundError
from countyscope.utils import ColorCycler, geometry_bbox, slugify_region

logger = logging.getLogger(__name__)

region_colors = ColorCycler(REGION_PALETTE)


class RegionResolver:
    """
    Turns an optional county name into something Earth Engine can filter by.

    The two callers fall back differently when no county is given:
    ``area_of_interest`` uses a buffered default point, while
    ``export_collection`` uses the whole county collection.
    """

    def __init__(self, client: EarthEngineClient, colors: ColorCycler | None = None):
        self.client = client
        self.colors = colors or region_colors
        self.collection_id = config.REGION_COLLECTION_ID
        self.name_field = config.REGION_NAME_FIELD

    def is_whole_area(self, county_name: str | None) -> bool:
        return not county_name or county_name == config.WHOLE_AREA_LABEL

    def _counties(self) -> ee.FeatureCollection:
        return ee.FeatureCollection(self.collection_id)

    async def _matching(self, county_name: str) -> ee.FeatureCollection:
        matches = self._counties().filter(ee.Filter.eq(self.name_field, county_name))
        count = await self.client.get_info(
            matches.size(), description=f"looking up county '{county_name}'"
        )
        if count == 0:
            logger.info(f"County '{county_name}' not found in {self.collection_id}")
            raise RegionNotFoundError(county_name)
        return matches

    async def area_of_interest(self, county_name: str | None) -> ee.Geometry:
        """
        Geometry used to filter and clip imagery.

        Raises:
            RegionNotFoundError: if no county has that name
        """
        if self.is_whole_area(county_name):
            lon, lat = config.DEFAULT_AOI_POINT
            return ee.Geometry.Point([lon, lat]).buffer(
                config.DEFAULT_AOI_BUFFER_METERS
            )
        matches = await self._matching(county_name)
        return matches.geometry()

    async def export_collection(
        self, county_name: str | None
    ) -> tuple[ee.FeatureCollection, str]:
        """Collection and file name for a GeoJSON export."""
        if self.is_whole_area(county_name):
            return self._counties(), config.DOWNLOAD_ALL_FILENAME
        matches = await self._matching(county_name)
        return matches, download_filename(county_name)

    async def list_names(self) -> list[str]:
        names = self._counties().aggregate_array(self.name_field).sort()
        return await self.client.get_info(names, description="fetching county names")

    async def boundaries(self) -> dict[str, Any]:
        """
        County boundaries for display.

        Every feature gets a ``bbox`` and a ``color`` property; colors come
        from the shared palette in whatever order Earth Engine returns the
        features.
        """
        counties = self._counties()
        geojson = await self.client.get_info(
            counties, description="fetching county boundaries"
        )
        for feature in geojson.get("features", []):
            properties = feature.setdefault("properties", {})
            properties["bbox"] = geometry_bbox(feature.get("geometry"))
            properties["color"] = self.colors.next_color()
        county_list = await self.list_names()
        return {"geojson": geojson, "county_list": county_list}


def download_filename(county_name: str) -> str:
    return f"{slugify_region(county_name)}_boundary"
