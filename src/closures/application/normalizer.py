"""
Cleans closure text fields and collapses duplicated 24-hour closures.

The feature service re-emits one continuous closure as several records
with different time sub-ranges. Records sharing every descriptive field
are merged into one record spanning the combined range, but only when
all of them are "24Hrs" closures; partial-day closures that merely share
metadata stay separate.
"""
import re
from dataclasses import replace
from typing import Dict, List, Optional

from ..domain.entities import ClosureRecord, MergeGroupKey, MERGE_KEY_FIELDS
from ...common.logging import setup_logger

logger = setup_logger(__name__)

LOCATION_CUTOFF = ", Hawaii, "

# A run of line breaks, absorbing a period that already ended the line
_LINE_BREAKS = re.compile(r"\.?(?:[ \t]*\r?\n)+")


def replace_newlines_with_periods(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return _LINE_BREAKS.sub(". ", text)


def transform_location_string(location: Optional[str]) -> Optional[str]:
    """Drops the ', Hawaii, <country>' suffix from a location."""
    if location is None:
        return None
    index = location.find(LOCATION_CUTOFF)
    return location[:index] if index != -1 else location


def clean_text_fields(record: ClosureRecord) -> ClosureRecord:
    return replace(
        record,
        details=replace_newlines_with_periods(record.details),
        remarks=replace_newlines_with_periods(record.remarks),
        from_location=transform_location_string(record.from_location),
        to_location=transform_location_string(record.to_location),
    )


def merge_group_key(record: ClosureRecord) -> MergeGroupKey:
    values = (getattr(record, name) for name in MERGE_KEY_FIELDS)
    return tuple("" if value is None else value for value in values)


def _merge_group(group: List[ClosureRecord]) -> ClosureRecord:
    begins = [r.begin_timestamp for r in group if r.begin_timestamp is not None]
    ends = [r.end_timestamp for r in group if r.end_timestamp is not None]

    return replace(
        group[0],
        id=max(r.id for r in group),
        begin_timestamp=min(begins) if begins else None,
        end_timestamp=max(ends) if ends else None,
    )


def merge_identical_closures(records: List[ClosureRecord]) -> List[ClosureRecord]:
    """
    Groups records by merge key and collapses each all-24Hrs group into a
    single record. Groups are emitted in order of first appearance.
    """
    groups: Dict[MergeGroupKey, List[ClosureRecord]] = {}
    for record in records:
        groups.setdefault(merge_group_key(record), []).append(record)

    merged: List[ClosureRecord] = []
    for group in groups.values():
        if len(group) > 1 and all(r.is_24_hours for r in group):
            merged_record = _merge_group(group)
            logger.debug(
                f"Merged {len(group)} closures {[r.id for r in group]} into {merged_record.id}"
            )
            merged.append(merged_record)
        else:
            merged.extend(group)
    return merged


def normalize(raw: List[ClosureRecord]) -> List[ClosureRecord]:
    """
    Cleans text fields, then merges duplicated 24-hour closures.
    Idempotent on already-normalized input.
    """
    if not raw:
        return []
    return merge_identical_closures([clean_text_fields(r) for r in raw])
