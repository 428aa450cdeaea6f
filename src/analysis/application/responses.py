"""
Deserialization boundary for analysis service responses.

Every response is classified as exactly one of AnalysisSuccess,
ServiceErrorResponse or MalformedResponse before anything else looks
at it; unwrap() turns the non-success variants into exceptions.
"""
from typing import List

from pydantic import ValidationError as SchemaValidationError

from ..domain.entities import AnalysisResult, AnalysisSuccess, MalformedResponse, ServiceErrorResponse
from ...common.exceptions import AnalysisServiceError, RateLimitedError
from ...common.schemas.analysis import AnalysisResponse, ErrorResponse, ImpactedClosure

STAGE = "analyze"
RATE_LIMIT_STATUS = 429


def parse_analysis_response(status_code: int, body: object) -> AnalysisResult:
    if isinstance(body, dict):
        if 'error' in body:
            try:
                envelope = ErrorResponse.model_validate(body)
                return ServiceErrorResponse(message=envelope.error, status_code=status_code)
            except SchemaValidationError:
                return MalformedResponse(status_code=status_code, body=body)

        if 'impactedClosures' in body and 200 <= status_code < 300:
            try:
                parsed = AnalysisResponse.model_validate(body)
                return AnalysisSuccess(impacted_closures=parsed.impacted_closures)
            except SchemaValidationError:
                return MalformedResponse(status_code=status_code, body=body)

    return MalformedResponse(status_code=status_code, body=body)


def is_rate_limited(response: ServiceErrorResponse) -> bool:
    return response.status_code == RATE_LIMIT_STATUS or 'quota' in response.message.lower()


def unwrap(result: AnalysisResult) -> List[ImpactedClosure]:
    if isinstance(result, AnalysisSuccess):
        return result.impacted_closures

    if isinstance(result, ServiceErrorResponse):
        error_cls = RateLimitedError if is_rate_limited(result) else AnalysisServiceError
        raise error_cls(
            f"Analysis function failed: {result.message}",
            stage=STAGE,
            status_code=result.status_code,
        )

    if not 200 <= result.status_code < 300:
        raise AnalysisServiceError(
            f"Failed to analyze driving plan: HTTP status {result.status_code}",
            stage=STAGE,
            status_code=result.status_code,
        )
    raise AnalysisServiceError(
        "Received an unexpected response format from the analysis service.",
        stage=STAGE,
        status_code=result.status_code,
    )
