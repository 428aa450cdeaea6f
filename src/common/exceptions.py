from typing import Optional


class LaneClosureError(Exception):
    """Base exception for all lane closure errors."""

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message

class NetworkError(LaneClosureError):
    """Raised when an external service cannot be reached."""
    pass

class UpstreamDataError(LaneClosureError):
    """Raised when the feature service answers with an error status or envelope."""
    pass

UpstreamError = UpstreamDataError

class ValidationError(LaneClosureError):
    """Raised when a driving plan or analysis request is malformed."""
    pass

class AnalysisServiceError(LaneClosureError):
    """Raised when the analysis service reports an error or returns an unexpected shape."""

    def __init__(self, message: str, stage: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, stage)
        self.status_code = status_code

class RateLimitedError(AnalysisServiceError):
    """Raised when the generative backend signals quota exhaustion."""
    pass

class ConfigurationError(LaneClosureError):
    """Raised when configuration is invalid."""
    pass
