from .closure import (
    ClosureFeatureProperties,
    ClosureFeature,
    ClosureFeatureCollection,
    FeatureServiceError,
    CLOSURE_OUT_FIELDS,
)
from .analysis import (
    ImpactLevel,
    ImpactScore,
    ImpactedClosure,
    ClosureAnalysisInput,
    AnalyzeRequest,
    AnalysisResponse,
    ErrorResponse,
)

__all__ = [
    "ClosureFeatureProperties",
    "ClosureFeature",
    "ClosureFeatureCollection",
    "FeatureServiceError",
    "CLOSURE_OUT_FIELDS",
    "ImpactLevel",
    "ImpactScore",
    "ImpactedClosure",
    "ClosureAnalysisInput",
    "AnalyzeRequest",
    "AnalysisResponse",
    "ErrorResponse",
]
