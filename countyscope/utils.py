import itertools
import re
from collections.abc import Sequence
from typing import Any

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry


class ColorCycler:
    """Round-robin over a fixed palette, wrapping around.

    Shared across requests; the counter is advisory only, so concurrent
    callers may occasionally see the same color.
    """

    def __init__(self, palette: Sequence[str]):
        if not palette:
            raise ValueError("palette must not be empty")
        self.palette = tuple(palette)
        self._counter = itertools.count()

    def next_color(self) -> str:
        return self.palette[next(self._counter) % len(self.palette)]


def geojson_to_shapely(geojson: dict) -> BaseGeometry:
    """converts geojson to shapely object"""
    return shape(geojson)


def geometry_bbox(geojson: dict[str, Any] | None) -> list[float] | None:
    """[minLon, minLat, maxLon, maxLat] of a GeoJSON geometry."""
    if not geojson or "type" not in geojson:
        return None
    geom = geojson_to_shapely(geojson)
    if geom.is_empty:
        return None
    return list(geom.bounds)


def slugify_region(name: str) -> str:
    return re.sub(r"\s", "_", name).lower()
