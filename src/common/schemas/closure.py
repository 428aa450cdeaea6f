from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ClosureFeatureProperties(BaseModel):
    """
    Attributes of one feature from the lane closure FeatureServer layer.
    Every attribute is nullable: the feed is not trusted.
    """
    object_id: Optional[int] = Field(None, alias="OBJECTID", description="Source record identifier")
    route: Optional[str] = Field(None, alias="Route", description="Route name or number")
    direction: Optional[str] = Field(None, alias="direct", description="Travel direction")
    from_location: Optional[str] = Field(None, alias="intsfroml", description="Closure start location")
    to_location: Optional[str] = Field(None, alias="intstol", description="Closure end location")
    begin_date: Optional[int] = Field(None, alias="beginDate", description="Start (epoch ms)")
    end_date: Optional[int] = Field(None, alias="enDate", description="End (epoch ms)")
    num_lanes: Optional[int] = Field(None, alias="NumLanes", description="Number of closed lanes")
    closure_side: Optional[str] = Field(None, alias="ClosureSide")
    close_fact: Optional[str] = Field(None, alias="CloseFact", description="Closure type when lanes are absent")
    closure_reason: Optional[str] = Field(None, alias="ClosReason")
    details: Optional[str] = Field(None, alias="DirPRemarks", description="Driver-facing details")
    remarks: Optional[str] = Field(None, alias="Remarks")
    hours: Optional[str] = Field(None, alias="ClosHours", description="Hours pattern, e.g. '24Hrs'")
    island: Optional[str] = Field(None, alias="Island")

    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class ClosureFeature(BaseModel):
    properties: ClosureFeatureProperties

    model_config = ConfigDict(extra='ignore')


class ClosureFeatureCollection(BaseModel):
    """GeoJSON feature collection returned by a successful query."""
    features: List[ClosureFeature] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')


class FeatureServiceErrorDetail(BaseModel):
    code: Optional[int] = None
    message: str = "Unknown error"

    model_config = ConfigDict(extra='ignore')


class FeatureServiceError(BaseModel):
    """Error envelope: {"error": {"code": ..., "message": ...}}"""
    error: FeatureServiceErrorDetail


# Ordered so the explicit outFields list is stable across requests
CLOSURE_OUT_FIELDS = [
    info.alias for info in ClosureFeatureProperties.model_fields.values()
]
