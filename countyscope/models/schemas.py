from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class EnhancementKind(str, Enum):
    COMPOSITE = "composite"
    INDEX = "index"


class LegendClass(BaseModel):
    model_config = ConfigDict(frozen=True)
    color: str
    label: str


class Legend(BaseModel):
    """Legend shown next to the map: a description or an ordered class list."""

    model_config = ConfigDict(frozen=True)
    title: Annotated[str, Field(min_length=1)]
    description: str | None = None
    classes: tuple[LegendClass, ...] | None = None

    @model_validator(mode="after")
    def check_body(self):
        if (self.description is None) == (self.classes is None):
            raise ValueError("Legend needs exactly one of description or classes")
        return self


class EnhancementSpec(BaseModel):
    """One analysis mode, defined once at import time and never per request."""

    model_config = ConfigDict(frozen=True)
    name: str
    kind: EnhancementKind
    band_set: tuple[str, ...] = ()
    index_bands: tuple[str, str] | None = None
    index_name: str | None = None
    value_range: tuple[float, float]
    gamma: float | None = None
    color_ramp: tuple[str, ...] = ()
    legend: Legend

    @model_validator(mode="after")
    def check_shape(self):
        low, high = self.value_range
        if low >= high:
            raise ValueError(f"value_range min must be below max, got {low}..{high}")
        if self.kind is EnhancementKind.COMPOSITE:
            if not 1 <= len(self.band_set) <= 3:
                raise ValueError("Composite enhancements need 1 to 3 bands")
        else:
            if self.index_bands is None or not self.index_name:
                raise ValueError("Index enhancements need index_bands and index_name")
            if not self.color_ramp:
                raise ValueError("Index enhancements need a color ramp")
        return self

    @property
    def is_index(self) -> bool:
        return self.kind is EnhancementKind.INDEX


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisRequest(CamelModel):
    """Body of ``POST /analyze``.

    Required fields are declared optional so the route can report every
    missing one in a single 400 instead of the default 422.
    """

    year: Annotated[int | None, Field(ge=1900, le=2100)] = None
    bands: list[str] | None = None
    enhancement: str | None = None
    county_name: str | None = None
    cloud_cover: Annotated[float | None, Field(ge=0, le=100)] = None

    def missing_fields(self) -> list[str]:
        required = {
            "year": self.year,
            "bands": self.bands,
            "enhancement": self.enhancement,
            "cloudCover": self.cloud_cover,
        }
        return [
            name for name, value in required.items() if value is None or value in ("", [])
        ]


class MapId(CamelModel):
    mapid: str
    token: str | None = None
    url_format: str | None = None


class AnalysisResponse(CamelModel):
    map_id: MapId
    legend_info: Legend


class RegionNamesResponse(BaseModel):
    names: list[str]


class RegionBoundariesResponse(CamelModel):
    geojson: dict[str, Any]
    county_list: list[str]


class DownloadUrlResponse(CamelModel):
    download_url: str
