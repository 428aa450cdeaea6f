"""
Domain protocols for the impact analysis module.
"""
from typing import Any, Dict, Protocol

class ImpactModel(Protocol):
    """
    Generative backend constrained to a JSON response schema.
    Returns the raw JSON text, or raises AnalysisServiceError /
    RateLimitedError.
    """
    def generate(self, contents: str, system_instruction: str, response_schema: Dict[str, Any]) -> str:
        ...
