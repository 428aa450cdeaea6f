"""
Domain module initialization.
"""
from .entities import (
    ClosureRecord,
    MergeGroupKey,
    MERGE_KEY_FIELDS,
    HOURS_24
)
from .protocols import ClosureSource
