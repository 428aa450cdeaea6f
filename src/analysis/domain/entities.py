"""
Domain entities for the impact analysis module.
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from ...closures.domain.entities import ClosureRecord
from ...common.schemas.analysis import ImpactedClosure

@dataclass(frozen=True)
class ScoredClosure:
    """
    A canonical closure paired with its analysis, if the analysis
    service considered it material to the driving plan.
    """
    record: ClosureRecord
    impact: Optional[ImpactedClosure] = None

    @property
    def severity(self) -> int:
        return self.impact.impact_score.value if self.impact else 0


# Deserialized analysis responses

@dataclass(frozen=True)
class AnalysisSuccess:
    impacted_closures: List[ImpactedClosure]

@dataclass(frozen=True)
class ServiceErrorResponse:
    message: str
    status_code: int

@dataclass(frozen=True)
class MalformedResponse:
    status_code: int
    body: object = None

AnalysisResult = Union[AnalysisSuccess, ServiceErrorResponse, MalformedResponse]
