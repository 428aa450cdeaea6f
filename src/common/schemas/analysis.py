from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ImpactLevel(str, Enum):
    Low = "Low"
    Medium = "Medium"
    High = "High"
    Severe = "Severe"

    @property
    def score(self) -> int:
        return IMPACT_VALUES[self]

    @classmethod
    def value_for(cls, level: "ImpactLevel") -> int:
        return IMPACT_VALUES[cls(level)]


IMPACT_VALUES = {
    ImpactLevel.Low: 1,
    ImpactLevel.Medium: 2,
    ImpactLevel.High: 3,
    ImpactLevel.Severe: 4,
}


class ClosureAnalysisInput(BaseModel):
    """
    Minimal, display-ready closure shape sent to the analysis service.
    Serialized with the aliases (Route, From, To, ...).
    Numeric text fields are coerced to strings and unknown keys are kept,
    so callers may send extra context along with each closure.
    """
    id: Optional[int] = Field(None, description="Closure identifier")
    route: Optional[str] = Field(None, alias="Route")
    from_location: Optional[str] = Field(None, alias="From")
    to_location: Optional[str] = Field(None, alias="To")
    starts: Optional[str] = Field(None, alias="Starts")
    ends: Optional[str] = Field(None, alias="Ends")
    lanes_affected: Optional[str] = Field(None, alias="LanesAffected")
    reason: Optional[str] = Field(None, alias="Reason")
    details: Optional[str] = Field(None, alias="Details")
    remarks: Optional[str] = Field(None, alias="Remarks")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow", coerce_numbers_to_str=True)


class ImpactScore(BaseModel):
    level: ImpactLevel = Field(..., description="Low, Medium, High or Severe")
    value: int = Field(..., ge=1, le=4, description="1 = Low, 2 = Medium, 3 = High, 4 = Severe")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def value_matches_level(self):
        if self.level.score != self.value:
            raise ValueError(f"impact value {self.value} does not match level {self.level.value}")
        return self


class ImpactedClosure(BaseModel):
    """Analysis of one closure against a driving plan."""
    id: int = Field(..., description="Identifier of an analyzed closure")
    analysis_text: str = Field(..., alias="analysis", description="Self-contained explanation")
    impact_score: ImpactScore = Field(..., alias="impactScore")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AnalyzeRequest(BaseModel):
    closures: List[ClosureAnalysisInput]
    driving_plan: str = Field(..., alias="drivingPlan")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('driving_plan')
    @classmethod
    def plan_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('drivingPlan must not be blank')
        return v


class AnalysisResponse(BaseModel):
    impacted_closures: List[ImpactedClosure] = Field(..., alias="impactedClosures")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
