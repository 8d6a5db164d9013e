"""Resolve an analysis type to its display settings."""

import logging
from typing import Any

from countyscope.constants.enhancements import ENHANCEMENTS
from countyscope.core.exceptions import InvalidEnhancementError
from countyscope.models import EnhancementSpec

logger = logging.getLogger(__name__)


def resolve_enhancement(name: str) -> EnhancementSpec:
    """
    Look up an enhancement by name.

    Args:
        name: one of the keys of ``ENHANCEMENTS``

    Returns:
        The shared, immutable table entry

    Raises:
        InvalidEnhancementError: for any other name
    """
    try:
        return ENHANCEMENTS[name]
    except (KeyError, TypeError):
        raise InvalidEnhancementError(name) from None


def visualization_params(
    spec: EnhancementSpec, client_bands: list[str] | None
) -> dict[str, Any]:
    """
    Build the ``getMapId`` visualization parameters.

    Composite modes display the bands in the order the client asked for,
    even though the table defines its own band set; index modes ignore the
    client bands and use the color ramp.
    """
    low, high = spec.value_range
    if spec.is_index:
        return {"min": low, "max": high, "palette": list(spec.color_ramp)}

    bands = list(client_bands) if client_bands else list(spec.band_set)
    if tuple(bands) != spec.band_set:
        logger.warning(
            f"Client bands {bands} differ from the {spec.name} band set "
            f"{list(spec.band_set)}; displaying client bands"
        )
    params: dict[str, Any] = {"bands": bands, "min": low, "max": high}
    if spec.gamma is not None:
        params["gamma"] = spec.gamma
    return params
