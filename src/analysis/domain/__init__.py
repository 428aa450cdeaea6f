"""
Domain module initialization.
"""
from .entities import (
    ScoredClosure,
    AnalysisSuccess,
    ServiceErrorResponse,
    MalformedResponse,
    AnalysisResult
)
from .protocols import ImpactModel
