"""
API for analyzing lane closures against a driving plan.
"""
import json
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError as SchemaValidationError
from starlette.concurrency import run_in_threadpool

from .....common.exceptions import AnalysisServiceError, RateLimitedError
from .....common.logging import setup_logger
from .....common.schemas.analysis import AnalysisResponse, AnalyzeRequest
from ....application.service import ImpactAnalysisService

logger = setup_logger(__name__)

app = FastAPI()

ANALYZE_PATH = "/analyze-lane-closures"

# Singleton
_service: Optional[ImpactAnalysisService] = None

def init_service(service: ImpactAnalysisService):
    global _service
    _service = service

def get_service() -> Optional[ImpactAnalysisService]:
    return _service

def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)

@app.options(ANALYZE_PATH)
async def preflight():
    """CORS preflight; headers are added by the CORS middleware."""
    return PlainTextResponse("ok")

@app.post(ANALYZE_PATH)
async def analyze_lane_closures(request: Request):
    """
    Body example:
    {
        "closures": [{"id": 1, "Route": "H-1 (Direction: Eastbound)", ...}],
        "drivingPlan": "It is currently ... Planned route: Kapolei to Waikiki at 5 PM"
    }
    """
    service = get_service()
    if service is None or not service.is_configured:
        logger.error("Gemini API key is not configured.")
        return error_response("Server configuration error: Missing API key.", 500)

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to parse request JSON: {e}")
        return error_response(f"Bad Request: Invalid JSON format. {e}", 400)

    try:
        analyze_request = AnalyzeRequest.model_validate(payload)
    except SchemaValidationError:
        return error_response("Bad Request: Missing or invalid 'closures' array or 'drivingPlan' string.", 400)

    try:
        # The model call is blocking network I/O
        impacted = await run_in_threadpool(service.analyze, analyze_request)
    except RateLimitedError as e:
        logger.error(f"Error during AI interaction: {e}")
        return error_response(e.message, 429)
    except AnalysisServiceError as e:
        logger.error(f"Error during AI interaction: {e}")
        return error_response(e.message, 503)

    response = AnalysisResponse(impacted_closures=impacted)
    return response.model_dump(by_alias=True, mode='json')
