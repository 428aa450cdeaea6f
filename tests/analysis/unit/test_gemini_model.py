import pytest
from unittest.mock import MagicMock
from google.genai import errors

from src.analysis.infrastructure.gemini_model import GeminiImpactModel
from src.common.exceptions import AnalysisServiceError, RateLimitedError


@pytest.fixture
def genai_client():
    client = MagicMock()
    resp = MagicMock()
    resp.text = "[]"
    resp.usage_metadata.prompt_token_count = 10
    client.models.generate_content.return_value = resp
    return client

def test_generate_uses_structured_output(genai_client):
    model = GeminiImpactModel(api_key="key", model="gemini-test", client=genai_client)

    assert model.generate("contents", "instruction", {"type": "ARRAY"}) == "[]"

    kwargs = genai_client.models.generate_content.call_args[1]
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == "contents"
    assert kwargs["config"]["response_mime_type"] == "application/json"
    assert kwargs["config"]["response_schema"] == {"type": "ARRAY"}
    assert kwargs["config"]["system_instruction"] == "instruction"
    assert kwargs["config"]["temperature"] == 0.0

def test_quota_error_maps_to_rate_limited(genai_client):
    genai_client.models.generate_content.side_effect = errors.ClientError(
        429, {"error": {"code": 429, "message": "Resource has been exhausted (e.g. check quota).", "status": "RESOURCE_EXHAUSTED"}}
    )
    model = GeminiImpactModel(api_key="key", client=genai_client)
    with pytest.raises(RateLimitedError) as excinfo:
        model.generate("c", "i", {})
    assert excinfo.value.status_code == 429

def test_other_api_error_is_service_error(genai_client):
    genai_client.models.generate_content.side_effect = errors.ServerError(
        500, {"error": {"code": 500, "message": "Internal error", "status": "INTERNAL"}}
    )
    model = GeminiImpactModel(api_key="key", client=genai_client)
    with pytest.raises(AnalysisServiceError) as excinfo:
        model.generate("c", "i", {})
    assert not isinstance(excinfo.value, RateLimitedError)

def test_empty_text_is_service_error(genai_client):
    genai_client.models.generate_content.return_value.text = None
    model = GeminiImpactModel(api_key="key", client=genai_client)
    with pytest.raises(AnalysisServiceError):
        model.generate("c", "i", {})
