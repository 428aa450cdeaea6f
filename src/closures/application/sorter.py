from typing import Iterable, List, Tuple

from ..domain.entities import ClosureRecord


def _sort_key(record: ClosureRecord) -> Tuple:
    # Missing begin timestamps sort first
    begin = record.begin_timestamp
    return (
        (0, 0) if begin is None else (1, begin),
        record.route or "",
        record.from_location or "",
    )


def sort_closures(records: Iterable[ClosureRecord]) -> List[ClosureRecord]:
    """
    Stable order by begin timestamp, then route, then from location.
    Returns a new list.
    """
    return sorted(records, key=_sort_key)
