import logging

from fastapi import APIRouter

from countyscope.api.deps import ImageryBuilderDep, RegionResolverDep
from countyscope.core.exceptions import MissingParametersError
from countyscope.models import AnalysisRequest, AnalysisResponse, MapId
from countyscope.services.enhancement import resolve_enhancement

router = APIRouter(tags=["Analysis"])
logger = logging.getLogger(__name__)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    summary="Generate a Sentinel-2 map",
    description="Build a yearly median composite for a county and return its map id and legend",
)
async def analyze(
    request: AnalysisRequest,
    regions: RegionResolverDep,
    imagery: ImageryBuilderDep,
):
    """
    Errors map to: 400 missing fields or unknown enhancement, 404 unknown
    county or no imagery, 500 Earth Engine failures.
    """
    missing = request.missing_fields()
    if missing:
        raise MissingParametersError(missing)

    logger.info(
        f"Analysis {request.enhancement} for {request.county_name or 'default area'} "
        f"in {request.year}, cloud cover < {request.cloud_cover}%"
    )
    aoi = await regions.area_of_interest(request.county_name)
    spec = resolve_enhancement(request.enhancement)
    map_id = await imagery.build_map(
        aoi,
        year=request.year,
        cloud_cover=request.cloud_cover,
        spec=spec,
        client_bands=request.bands,
        region_label=request.county_name,
    )
    return AnalysisResponse(map_id=MapId(**map_id), legend_info=spec.legend)
