"""
Domain entities for the lane closure module.
"""
from dataclasses import dataclass, fields
from typing import Optional, Tuple

HOURS_24 = "24Hrs"

@dataclass(frozen=True)
class ClosureRecord:
    """
    One physical lane closure event.
    Timestamps are epoch milliseconds.
    """
    id: int
    route: Optional[str] = None
    direction: Optional[str] = None
    from_location: Optional[str] = None
    to_location: Optional[str] = None
    begin_timestamp: Optional[int] = None
    end_timestamp: Optional[int] = None
    num_lanes_closed: Optional[int] = None
    closure_side: Optional[str] = None
    closure_factor: Optional[str] = None # e.g. "Shoulder", used when lane count is absent
    closure_reason: Optional[str] = None
    details: Optional[str] = None
    remarks: Optional[str] = None
    hours_pattern: Optional[str] = None
    island: Optional[str] = None

    @property
    def is_24_hours(self) -> bool:
        return self.hours_pattern == HOURS_24


# Fields that do not take part in the merge group identity
NON_KEY_FIELDS = ("id", "begin_timestamp", "end_timestamp", "hours_pattern", "island")

MERGE_KEY_FIELDS: Tuple[str, ...] = tuple(
    f.name for f in fields(ClosureRecord) if f.name not in NON_KEY_FIELDS
)

MergeGroupKey = Tuple[object, ...]
