"""Enhancement table for Sentinel-2 analysis modes."""

from countyscope.models.schemas import (
    EnhancementKind,
    EnhancementSpec,
    Legend,
    LegendClass,
)

# Shared display stretch for the 3-band composites (surface reflectance DN)
COMPOSITE_RANGE = (0, 3000)
COMPOSITE_GAMMA = 1.4

NDVI_RAMP = ("#d73027", "#fc8d59", "#fee08b", "#d9ef8b", "#99d594", "#4a864d")
NDMI_RAMP = (
    "#a50026",
    "#d73027",
    "#f46d43",
    "#fee090",
    "#e0f3f8",
    "#abd9e9",
    "#74add1",
)


def _composite(
    name: str, band_set: tuple[str, ...], title: str, description: str
) -> EnhancementSpec:
    return EnhancementSpec(
        name=name,
        kind=EnhancementKind.COMPOSITE,
        band_set=band_set,
        value_range=COMPOSITE_RANGE,
        gamma=COMPOSITE_GAMMA,
        legend=Legend(title=title, description=description),
    )


ENHANCEMENTS: dict[str, EnhancementSpec] = {
    "true_color": _composite(
        "true_color", ("B4", "B3", "B2"), "True Color", "Natural appearance."
    ),
    "false_color": _composite(
        "false_color",
        ("B8", "B4", "B3"),
        "False Color (Vegetation)",
        "Healthy vegetation is red.",
    ),
    "agriculture": _composite(
        "agriculture", ("B11", "B8", "B2"), "Agriculture", "Highlights crop health."
    ),
    "urban": _composite(
        "urban", ("B12", "B11", "B4"), "Urban", "Urban areas are cyan/blue."
    ),
    "ndvi": EnhancementSpec(
        name="ndvi",
        kind=EnhancementKind.INDEX,
        index_bands=("B8", "B4"),  # NIR, red
        index_name="NDVI",
        value_range=(-0.2, 0.8),
        color_ramp=NDVI_RAMP,
        legend=Legend(
            title="Normalized Difference Vegetation Index (NDVI)",
            classes=(
                LegendClass(color="#d73027", label="Very Low Vegetation (-0.2 to 0)"),
                LegendClass(color="#fc8d59", label="Low Vegetation (0 to 0.2)"),
                LegendClass(color="#fee08b", label="Medium Vegetation (0.2 to 0.4)"),
                LegendClass(color="#d9ef8b", label="High Vegetation (0.4 to 0.6)"),
                LegendClass(
                    color="#99d594", label="Very High Vegetation (0.6 to 0.8)"
                ),
                LegendClass(color="#4a864d", label="Dense Vegetation (> 0.8)"),
            ),
        ),
    ),
    "moisture_index": EnhancementSpec(
        name="moisture_index",
        kind=EnhancementKind.INDEX,
        index_bands=("B8A", "B11"),  # narrow NIR, SWIR1
        index_name="NDMI",
        value_range=(-0.5, 0.5),
        color_ramp=NDMI_RAMP,
        legend=Legend(
            title="Normalized Difference Moisture Index (NDMI)",
            classes=(
                LegendClass(color="#a50026", label="Low Moisture"),
                LegendClass(color="#d73027", label="Dry Vegetation"),
                LegendClass(color="#f46d43", label="Medium Moisture"),
                LegendClass(color="#fee090", label="High Moisture"),
                LegendClass(color="#e0f3f8", label="Very High Moisture"),
                LegendClass(color="#abd9e9", label="Water"),
                LegendClass(color="#74add1", label="Saturated"),
            ),
        ),
    ),
}

# Display colors handed out round-robin to county boundaries
REGION_PALETTE = (
    "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#FF00FF", "#00FFFF", "#FFA500",
    "#800080", "#FFC0CB", "#A52A2A", "#808080", "#000000", "#FFFFFF", "#C0C0C0",
    "#800000", "#808000", "#008000", "#008080", "#000080", "#FF6347", "#40E0D0",
    "#EE82EE", "#90EE90", "#DDA0DD", "#98FB98", "#F0E68C", "#B0E0E6", "#AFEEEE",
    "#F5DEB3", "#DEB887", "#D2B48C", "#BC8F8F", "#F4A460", "#D2691E", "#CD853F",
    "#A0522D", "#8B4513", "#696969", "#2F4F4F", "#708090", "#778899", "#B0C4DE",
    "#87CEEB", "#87CEFA", "#4682B4", "#4169E1", "#6495ED", "#1E90FF", "#00BFFF",
)  # fmt: skip
