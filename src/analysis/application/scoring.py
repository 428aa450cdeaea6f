from typing import Dict, List

from ..domain.entities import ScoredClosure
from ...closures.domain.entities import ClosureRecord
from ...common.logging import setup_logger
from ...common.schemas.analysis import ImpactedClosure

logger = setup_logger(__name__)


def merge_impacts(records: List[ClosureRecord], impacted: List[ImpactedClosure]) -> List[ScoredClosure]:
    """
    Pairs each canonical closure with its analysis, keeping closure order.
    Analyses for ids outside the closure set are dropped; when an id is
    reported twice the first analysis wins.
    """
    known_ids = {r.id for r in records}
    by_id: Dict[int, ImpactedClosure] = {}

    for item in impacted:
        if item.id not in known_ids:
            logger.warning(f"Dropping analysis for unknown closure id {item.id}")
            continue
        if item.id in by_id:
            logger.warning(f"Duplicate analysis for closure id {item.id}, keeping the first")
            continue
        by_id[item.id] = item

    return [ScoredClosure(record=r, impact=by_id.get(r.id)) for r in records]


def impacted_only(scored: List[ScoredClosure]) -> List[ScoredClosure]:
    """Closures with an analysis, most severe first, otherwise in canonical order."""
    return sorted((s for s in scored if s.impact), key=lambda s: -s.severity)
