"""
Sentinel-2 composite and map-tile generation.

Steps for one analysis:
1. Filter the imagery collection by area, calendar year and cloud cover
2. Count matching scenes and stop if there are none
3. Median-composite the scenes and clip to the area
4. Apply the enhancement (normalized difference for index modes)
5. Ask Earth Engine for a map id
"""

import logging
from typing import Any

import ee

from countyscope.clients.earth_engine import EarthEngineClient
from countyscope.core.config import config
from countyscope.core.exceptions import NoImageryFoundError
from countyscope.models import EnhancementSpec
from countyscope.services.enhancement import visualization_params

logger = logging.getLogger(__name__)


def year_date_range(year: int) -> tuple[str, str]:
    """Start and exclusive end covering the whole calendar ``year``."""
    return f"{year}-01-01", f"{year + 1}-01-01"


class ImageryQueryBuilder:
    """Builds Earth Engine imagery queries for an area and an enhancement."""

    def __init__(self, client: EarthEngineClient):
        self.client = client
        self.collection_id = config.IMAGERY_COLLECTION_ID
        self.cloud_property = config.CLOUD_COVER_PROPERTY

    def filtered_collection(
        self, aoi: ee.Geometry, year: int, cloud_cover: float
    ) -> ee.ImageCollection:
        start, end = year_date_range(year)
        return (
            ee.ImageCollection(self.collection_id)
            .filterBounds(aoi)
            .filterDate(start, end)
            .filter(ee.Filter.lt(self.cloud_property, float(cloud_cover)))
        )

    def composite(
        self, collection: ee.ImageCollection, aoi: ee.Geometry, spec: EnhancementSpec
    ) -> ee.Image:
        image = collection.median().clip(aoi)
        if spec.is_index:
            image = image.normalizedDifference(list(spec.index_bands)).rename(
                spec.index_name
            )
        return image

    async def build_map(
        self,
        aoi: ee.Geometry,
        year: int,
        cloud_cover: float,
        spec: EnhancementSpec,
        client_bands: list[str] | None = None,
        region_label: str | None = None,
    ) -> dict[str, Any]:
        """
        Run the full query and return the map id.

        Raises:
            NoImageryFoundError: if no scene matches the filters
            TileGenerationError: if Earth Engine cannot produce tiles
        """
        collection = self.filtered_collection(aoi, year, cloud_cover)
        count = await self.client.get_info(
            collection.size(), description="counting Sentinel-2 scenes"
        )
        label = region_label or config.WHOLE_AREA_LABEL
        if count == 0:
            raise NoImageryFoundError(year, label, cloud_cover)
        logger.info(
            f"{count} scenes for {label} in {year} below {cloud_cover}% cloud cover"
        )

        image = self.composite(collection, aoi, spec)
        vis_params = visualization_params(spec, client_bands)
        return await self.client.get_map_id(image, vis_params)
