"""
Client for the impact analysis service.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

import requests

from .responses import STAGE, parse_analysis_response, unwrap
from .scoring import merge_impacts
from ..domain.entities import MalformedResponse, ScoredClosure
from ...closures.application.transformer import DEFAULT_TIMEZONE, format_clock, format_date, to_analysis_inputs
from ...closures.domain.entities import ClosureRecord
from ...common.exceptions import NetworkError, ValidationError
from ...common.logging import setup_logger, log_execution_time
from ...common.schemas.analysis import ClosureAnalysisInput, ImpactedClosure

logger = setup_logger(__name__)


def with_current_datetime(plan: str, now: Optional[datetime] = None, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Prefixes the plan with the local date and time so the service can reason about 'now'."""
    moment = (now or datetime.now(timezone.utc)).astimezone(ZoneInfo(tz_name))
    return f"It is currently {format_date(moment)} at {format_clock(moment)}. Planned route: {plan}"


class ImpactAnalyzerClient:
    """
    Sends closures and a driving plan to the analysis endpoint.
    One request per call, no retries, no state between calls.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: Optional[str] = None,
        timeout_seconds: float = 120.0,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        return headers

    @log_execution_time(logger)
    def analyze(self, closures: List[ClosureAnalysisInput], plan: str) -> List[ImpactedClosure]:
        if not plan or not plan.strip():
            raise ValidationError("Driving plan must not be empty.", stage=STAGE)

        payload = {
            "closures": [c.model_dump(by_alias=True) for c in closures],
            "drivingPlan": plan,
        }

        try:
            response = self.session.post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Failed to analyze driving plan: {e}", stage=STAGE) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        result = parse_analysis_response(response.status_code, body)
        if isinstance(result, MalformedResponse):
            logger.error(f"Unexpected response format from analysis function: {body!r}")

        impacted = unwrap(result)
        logger.info(f"Analysis returned {len(impacted)} impacted closures out of {len(closures)}")
        return impacted


def analyze_driving_plan(
    client: ImpactAnalyzerClient,
    records: List[ClosureRecord],
    plan: str,
    tz_name: str = DEFAULT_TIMEZONE,
    now: Optional[datetime] = None,
) -> List[ScoredClosure]:
    """
    Caller-side flow: validate the plan, add the date context, analyze and
    merge the scores back onto the canonical closures.
    """
    if not plan or not plan.strip():
        raise ValidationError("Driving plan must not be empty.", stage=STAGE)

    impacted = client.analyze(
        to_analysis_inputs(records, tz_name),
        with_current_datetime(plan.strip(), now=now, tz_name=tz_name),
    )
    return merge_impacts(records, impacted)
