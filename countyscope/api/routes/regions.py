import logging

from fastapi import APIRouter

from countyscope.api.deps import RegionResolverDep
from countyscope.core.exceptions import RemoteServiceError
from countyscope.models.schemas import RegionBoundariesResponse, RegionNamesResponse

router = APIRouter(prefix="/regions", tags=["Regions"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=RegionNamesResponse,
    summary="List county names",
    description="Sorted list of county names in the county collection",
)
async def list_regions(regions: RegionResolverDep):
    try:
        names = await regions.list_names()
    except RemoteServiceError:
        logger.exception("Error fetching county list")
        raise RemoteServiceError(
            "Failed to fetch county list due to an internal server error."
        )
    return RegionNamesResponse(names=names)


@router.get(
    "/geojson",
    response_model=RegionBoundariesResponse,
    summary="County boundaries",
    description="All county features with a bounding box and display color each",
)
async def region_boundaries(regions: RegionResolverDep):
    try:
        boundaries = await regions.boundaries()
    except RemoteServiceError as e:
        logger.exception("Error fetching county GeoJSON")
        raise RemoteServiceError(
            f"Failed to fetch county boundaries for display. Details: {e.message}"
        )
    return RegionBoundariesResponse(**boundaries)
