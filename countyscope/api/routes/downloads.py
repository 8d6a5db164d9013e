import logging

from fastapi import APIRouter, Query

from countyscope.api.deps import EarthEngineDep, RegionResolverDep
from countyscope.core.exceptions import RemoteServiceError
from countyscope.models.schemas import DownloadUrlResponse

router = APIRouter(prefix="/download", tags=["Downloads"])
logger = logging.getLogger(__name__)


@router.get(
    "/geojson",
    response_model=DownloadUrlResponse,
    summary="GeoJSON download link",
    description="Temporary download URL for one county or, if omitted, all counties",
)
async def download_geojson(
    client: EarthEngineDep,
    regions: RegionResolverDep,
    county_name: str | None = Query(
        None, alias="countyName", description="County to export"
    ),
):
    collection, filename = await regions.export_collection(county_name)
    try:
        url = await client.get_download_url(
            collection, filetype="geojson", filename=filename
        )
    except RemoteServiceError:
        logger.exception(f"Error generating download URL for {filename}")
        raise RemoteServiceError("Failed to generate GeoJSON download link.")
    logger.info(f"Generated download link for {filename}")
    return DownloadUrlResponse(download_url=url)
