"""
Impact analysis: client, response handling, prompt and service.
"""
from .client import ImpactAnalyzerClient, analyze_driving_plan, with_current_datetime
from .scoring import merge_impacts, impacted_only
from .service import ImpactAnalysisService
