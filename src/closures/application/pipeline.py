from typing import List

from ..domain.entities import ClosureRecord
from ..domain.protocols import ClosureSource
from .normalizer import normalize
from .sorter import sort_closures
from ...common.logging import setup_logger

logger = setup_logger(__name__)

class ClosureAggregationPipeline:
    """
    Fetch -> sort -> normalize -> sort.
    Produces the canonical closure set for one island. Holds no state
    between calls.
    """

    def __init__(self, source: ClosureSource):
        self.source = source

    def fetch(self, island: str) -> List[ClosureRecord]:
        """Fetches raw records from the source and returns them normalized and sorted."""
        raw = self.source.fetch_raw(island)
        canonical = sort_closures(normalize(sort_closures(raw)))
        logger.info(f"Canonical closure set for {island}: {len(canonical)} of {len(raw)} raw records")
        return canonical
