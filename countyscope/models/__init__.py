from .schemas import (
    AnalysisRequest,
    AnalysisResponse,
    EnhancementKind,
    EnhancementSpec,
    Legend,
    LegendClass,
    MapId,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "EnhancementKind",
    "EnhancementSpec",
    "Legend",
    "LegendClass",
    "MapId",
]
