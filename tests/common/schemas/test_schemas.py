import pytest
from pydantic import ValidationError
from src.common.schemas import (
    AnalyzeRequest, ClosureAnalysisInput, ClosureFeatureCollection,
    ClosureFeatureProperties, ImpactedClosure, ImpactLevel, ImpactScore,
    CLOSURE_OUT_FIELDS
)

# --- Closure feature tests ---
def test_feature_properties_from_aliases():
    props = ClosureFeatureProperties.model_validate({
        "OBJECTID": 12, "Route": "H-1", "direct": "Westbound", "ClosHours": "24Hrs", "Active": 1
    })
    assert props.object_id == 12
    assert props.direction == "Westbound"
    assert props.hours == "24Hrs"
    assert props.begin_date is None

def test_feature_collection_defaults_to_empty():
    assert ClosureFeatureCollection.model_validate({"type": "FeatureCollection"}).features == []

def test_out_fields_are_wire_names():
    assert CLOSURE_OUT_FIELDS[0] == "OBJECTID"
    assert "DirPRemarks" in CLOSURE_OUT_FIELDS
    assert "intsfroml" in CLOSURE_OUT_FIELDS
    assert len(CLOSURE_OUT_FIELDS) == len(set(CLOSURE_OUT_FIELDS))

# --- Impact score tests ---
@pytest.mark.parametrize("level,value", [("Low", 1), ("Medium", 2), ("High", 3), ("Severe", 4)])
def test_impact_score_bijection(level, value):
    score = ImpactScore(level=level, value=value)
    assert score.level.score == value
    assert ImpactLevel.value_for(level) == value

def test_impact_score_mismatch():
    with pytest.raises(ValidationError):
        ImpactScore(level="High", value=1)

def test_impact_score_unknown_level():
    with pytest.raises(ValidationError):
        ImpactScore(level="Extreme", value=4)

def test_impacted_closure_aliases():
    item = ImpactedClosure.model_validate(
        {"id": 3, "analysis": "Expect delays.", "impactScore": {"level": "Low", "value": 1}}
    )
    assert item.analysis_text == "Expect delays."
    assert item.model_dump(by_alias=True, mode="json")["impactScore"] == {"level": "Low", "value": 1}

def test_impacted_closure_requires_id():
    with pytest.raises(ValidationError):
        ImpactedClosure.model_validate({"analysis": "x", "impactScore": {"level": "Low", "value": 1}})

# --- Request tests ---
def test_analysis_input_round_trips_aliases():
    payload = {"id": 1, "Route": "H-1 (Direction: N/A)", "LanesAffected": "Shoulder (Side: N/A)"}
    closure = ClosureAnalysisInput.model_validate(payload)
    assert closure.lanes_affected == "Shoulder (Side: N/A)"
    assert closure.model_dump(by_alias=True, exclude_none=True) == payload

def test_analyze_request_blank_plan():
    with pytest.raises(ValidationError):
        AnalyzeRequest.model_validate({"closures": [], "drivingPlan": " \n "})

def test_analysis_input_is_lenient():
    closure = ClosureAnalysisInput.model_validate({"id": 4, "Route": 93, "Milepost": 12.5})
    assert closure.route == "93"
    assert closure.model_dump(by_alias=True, exclude_none=True) == {"id": 4, "Route": "93", "Milepost": 12.5}
