"""
Maps canonical closure records to the shape sent to the analysis service.
This is the only place where missing values are rendered as "N/A".
"""
from datetime import datetime, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo

from ..domain.entities import ClosureRecord
from ...common.schemas.analysis import ClosureAnalysisInput

NOT_AVAILABLE = "N/A"
DEFAULT_TIMEZONE = "Pacific/Honolulu"


def _or_na(value) -> str:
    # Empty strings and zero are treated as missing, like the feed's own UI
    return str(value) if value else NOT_AVAILABLE


def format_clock(moment: datetime) -> str:
    """9:05 AM style, no leading zero on the hour."""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d} {'AM' if moment.hour < 12 else 'PM'}"


def format_date(moment: datetime) -> str:
    """Monday, 6/2/2025 style."""
    return f"{moment:%A}, {moment.month}/{moment.day}/{moment.year}"


def format_timestamp(timestamp_ms: Optional[int], tz_name: str = DEFAULT_TIMEZONE) -> str:
    if not timestamp_ms:
        return NOT_AVAILABLE
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).astimezone(ZoneInfo(tz_name))
    return f"{format_date(moment)}, {format_clock(moment)}"


def describe_route(record: ClosureRecord) -> str:
    return f"{_or_na(record.route)} (Direction: {_or_na(record.direction)})"


def describe_lanes(record: ClosureRecord) -> str:
    side = _or_na(record.closure_side)
    if record.num_lanes_closed:
        plural = "s" if record.num_lanes_closed > 1 else ""
        return f"{record.num_lanes_closed} Lane{plural} (Side: {side})"
    return f"{_or_na(record.closure_factor)} (Side: {side})"


def to_analysis_input(record: ClosureRecord, tz_name: str = DEFAULT_TIMEZONE) -> ClosureAnalysisInput:
    return ClosureAnalysisInput(
        id=record.id,
        route=describe_route(record),
        from_location=record.from_location,
        to_location=record.to_location,
        starts=format_timestamp(record.begin_timestamp, tz_name),
        ends=format_timestamp(record.end_timestamp, tz_name),
        lanes_affected=describe_lanes(record),
        reason=record.closure_reason,
        details=record.details,
        remarks=record.remarks,
    )


def to_analysis_inputs(records: List[ClosureRecord], tz_name: str = DEFAULT_TIMEZONE) -> List[ClosureAnalysisInput]:
    return [to_analysis_input(r, tz_name) for r in records]
