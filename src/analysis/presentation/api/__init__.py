"""
API package.
"""
from typing import Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from omegaconf import DictConfig
from starlette.exceptions import HTTPException as StarletteHTTPException

from .routes import analyze
from ...application.service import ImpactAnalysisService
from ...infrastructure.gemini_model import GeminiImpactModel
from ....common.config.models import DEFAULT_ALLOWED_ORIGINS

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"
CORS_ALLOW_METHODS = "POST, OPTIONS"

# Initialize main app
app = FastAPI(title="Lane Closure Impact API")
app.state.allowed_origins = list(DEFAULT_ALLOWED_ORIGINS)

def get_cors_headers(origin: Optional[str], allowed_origins: List[str]) -> Dict[str, str]:
    """
    Unlisted origins get the first allowed origin back, which the browser
    treats as a mismatch.
    """
    allow_origin = origin if origin and origin in allowed_origins else allowed_origins[0]
    return {
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Origin": allow_origin,
    }

@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(get_cors_headers(request.headers.get("origin"), app.state.allowed_origins))
    return response

@app.exception_handler(StarletteHTTPException)
async def http_error_envelope(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

# Include routers
app.include_router(analyze.app.router, tags=["analysis"])

def configure(cfg: DictConfig):
    """Wires the analysis service from the `service` config section."""
    service_cfg = cfg.service
    model = None
    if service_cfg.gemini_api_key:
        model = GeminiImpactModel(
            api_key=service_cfg.gemini_api_key,
            model=service_cfg.model,
            temperature=service_cfg.temperature,
        )
    analyze.init_service(ImpactAnalysisService(model))
    app.state.allowed_origins = list(service_cfg.allowed_origins) or list(DEFAULT_ALLOWED_ORIGINS)
