import pytest
from src.analysis.application.responses import parse_analysis_response, unwrap
from src.analysis.domain.entities import AnalysisSuccess, MalformedResponse, ServiceErrorResponse
from src.common.exceptions import AnalysisServiceError, RateLimitedError

GOOD = {"id": 3, "analysis": "Right lane closed.", "impactScore": {"level": "Severe", "value": 4}}


def test_success_variant():
    result = parse_analysis_response(200, {"impactedClosures": [GOOD]})
    assert isinstance(result, AnalysisSuccess)
    assert result.impacted_closures[0].analysis_text == "Right lane closed."

def test_empty_success():
    assert unwrap(parse_analysis_response(200, {"impactedClosures": []})) == []

def test_error_variant():
    result = parse_analysis_response(503, {"error": "AI Service Error: boom"})
    assert result == ServiceErrorResponse(message="AI Service Error: boom", status_code=503)

@pytest.mark.parametrize("status,body", [
    (200, None),
    (200, []),
    (200, {"impactedClosures": "nope"}),
    (200, {"impactedClosures": [{"id": 1}]}),
    (200, {"error": {"code": 1}}),
    (502, {"impactedClosures": [GOOD]}),
])
def test_malformed_variant(status, body):
    assert isinstance(parse_analysis_response(status, body), MalformedResponse)

def test_mismatched_level_and_value_is_malformed():
    bad = dict(GOOD, impactScore={"level": "Low", "value": 4})
    assert isinstance(parse_analysis_response(200, {"impactedClosures": [bad]}), MalformedResponse)

def test_unwrap_rate_limited():
    with pytest.raises(RateLimitedError):
        unwrap(ServiceErrorResponse(message="Too many requests", status_code=429))

def test_unwrap_malformed_non_2xx_mentions_status():
    with pytest.raises(AnalysisServiceError) as excinfo:
        unwrap(MalformedResponse(status_code=502))
    assert "502" in str(excinfo.value)
