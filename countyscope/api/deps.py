from typing import Annotated

from fastapi import Depends

from countyscope.clients.earth_engine import EarthEngineClient, earth_engine
from countyscope.services.imagery import ImageryQueryBuilder
from countyscope.services.regions import RegionResolver


def get_earth_engine() -> EarthEngineClient:
    """Readiness gate: only hands out the client once it is initialized."""
    earth_engine.ensure_ready()
    return earth_engine


EarthEngineDep = Annotated[EarthEngineClient, Depends(get_earth_engine)]


def get_region_resolver(client: EarthEngineDep) -> RegionResolver:
    return RegionResolver(client)


def get_imagery_builder(client: EarthEngineDep) -> ImageryQueryBuilder:
    return ImageryQueryBuilder(client)


RegionResolverDep = Annotated[RegionResolver, Depends(get_region_resolver)]
ImageryBuilderDep = Annotated[ImageryQueryBuilder, Depends(get_imagery_builder)]
