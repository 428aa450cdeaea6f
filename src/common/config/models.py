from dataclasses import dataclass, field
from typing import List, Optional

ARCGIS_BASE_URL = (
    "https://services.arcgis.com/HQ0xoN0EzDPBOEci/arcgis/rest/services/"
    "Lane_Closure_WFL1_View_NoEd/FeatureServer/0/query"
)

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "https://bronsonavila.github.io",
    "https://gptogo.app",
    "https://www.gptogo.app",
]

@dataclass
class ClosureFeedConfig:
    base_url: str = ARCGIS_BASE_URL
    island: str = "Oahu"
    lookahead_hours: int = 24
    timeout_seconds: float = 30.0

@dataclass
class AnalysisClientConfig:
    endpoint: str = "http://localhost:8000/analyze-lane-closures"
    api_key: Optional[str] = None
    timezone: str = "Pacific/Honolulu"
    timeout_seconds: float = 120.0
    plan: Optional[str] = None

@dataclass
class AnalysisServiceConfig:
    gemini_api_key: Optional[str] = None
    model: str = "gemini-2.5-flash"
    temperature: float = 0.0
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class AppConfig:
    closures: ClosureFeedConfig = field(default_factory=ClosureFeedConfig)
    analysis: AnalysisClientConfig = field(default_factory=AnalysisClientConfig)
    service: AnalysisServiceConfig = field(default_factory=AnalysisServiceConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
