import json
import pytest
from unittest.mock import Mock

from src.analysis.application.prompt import IMPACT_RESPONSE_SCHEMA, SYSTEM_INSTRUCTION
from src.analysis.application.service import ImpactAnalysisService
from src.analysis.domain.protocols import ImpactModel
from src.common.exceptions import AnalysisServiceError, ConfigurationError, RateLimitedError
from src.common.schemas.analysis import AnalyzeRequest, ClosureAnalysisInput


@pytest.fixture
def request_payload():
    return AnalyzeRequest(
        closures=[ClosureAnalysisInput(id=5, route="H-1 (Direction: Westbound)")],
        driving_plan="It is currently Monday, 6/2/2025 at 9:00 AM. Planned route: Aiea to Ewa",
    )

@pytest.fixture
def model():
    return Mock(spec=ImpactModel)

def test_service_parses_model_output(model, request_payload):
    model.generate.return_value = json.dumps([
        {"id": 5, "analysis": "The left lane is closed on your route.", "impactScore": {"level": "Medium", "value": 2.0}},
        {"id": 77, "analysis": "Unrelated.", "impactScore": {"level": "Low", "value": 1}},
    ])

    result = ImpactAnalysisService(model).analyze(request_payload)

    # ids are passed through; unknown ids are filtered by the caller
    assert [r.id for r in result] == [5, 77]
    assert result[0].impact_score.value == 2

    contents, instruction, schema = model.generate.call_args[0]
    assert "Aiea to Ewa" in contents
    assert instruction == SYSTEM_INSTRUCTION
    assert schema == IMPACT_RESPONSE_SCHEMA

def test_service_without_model(request_payload):
    service = ImpactAnalysisService(None)
    assert not service.is_configured
    with pytest.raises(ConfigurationError):
        service.analyze(request_payload)

def test_service_rejects_non_json_output(model, request_payload):
    model.generate.return_value = "The closure on H-1 is bad."
    with pytest.raises(AnalysisServiceError):
        ImpactAnalysisService(model).analyze(request_payload)

def test_service_rejects_off_schema_output(model, request_payload):
    model.generate.return_value = json.dumps({"id": 5})
    with pytest.raises(AnalysisServiceError):
        ImpactAnalysisService(model).analyze(request_payload)

def test_service_propagates_rate_limit(model, request_payload):
    model.generate.side_effect = RateLimitedError("AI Service Error: quota", status_code=429)
    with pytest.raises(RateLimitedError):
        ImpactAnalysisService(model).analyze(request_payload)
