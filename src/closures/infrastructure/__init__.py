"""
Infrastructure module initialization.
"""
from .arcgis_source import ArcGISClosureSource

__all__ = [
    "ArcGISClosureSource"
]
