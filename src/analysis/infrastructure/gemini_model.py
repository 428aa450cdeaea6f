"""
Impact model backed by Gemini structured outputs.

Uses `response_schema` with `response_mime_type='application/json'` so
`resp.text` is always JSON matching the schema.
"""
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors

from ...common.exceptions import AnalysisServiceError, RateLimitedError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

STAGE = "generate"


def _is_quota_error(error: errors.APIError) -> bool:
    return error.code == 429 or 'quota' in str(error).lower()


class GeminiImpactModel:
    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", temperature: float = 0.0,
                 client: Optional[genai.Client] = None):
        self.model = model
        self.temperature = temperature
        self.client = client or genai.Client(api_key=api_key)

    def generate(self, contents: str, system_instruction: str, response_schema: Dict[str, Any]) -> str:
        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config={
                    "response_mime_type": "application/json",
                    "response_schema": response_schema,
                    "system_instruction": system_instruction,
                    "temperature": self.temperature,
                },
            )
        except errors.APIError as e:
            if _is_quota_error(e):
                raise RateLimitedError(f"AI Service Error: {e}", stage=STAGE, status_code=429) from e
            raise AnalysisServiceError(f"AI Service Error: {e}", stage=STAGE) from e
        except Exception as e:
            # Transport failures inside the SDK surface as arbitrary exception types
            raise AnalysisServiceError(f"AI Service Error: {e}", stage=STAGE) from e

        usage = resp.usage_metadata
        if usage is not None:
            logger.info(
                f"Token usage - prompt: {usage.prompt_token_count}, "
                f"candidates: {usage.candidates_token_count}, "
                f"thoughts: {usage.thoughts_token_count}, total: {usage.total_token_count}"
            )

        if not resp.text:
            raise AnalysisServiceError("AI Service Error: empty response from model", stage=STAGE)
        return resp.text
