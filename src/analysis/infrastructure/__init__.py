"""
Infrastructure module initialization.
"""
from .gemini_model import GeminiImpactModel

__all__ = [
    "GeminiImpactModel"
]
