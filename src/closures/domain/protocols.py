"""
Domain protocols for the lane closure module.
"""
from typing import List, Protocol
from .entities import ClosureRecord

class ClosureSource(Protocol):
    """
    Protocol for retrieving raw, unnormalized closure records for one island.
    """
    def fetch_raw(self, island: str) -> List[ClosureRecord]:
        ...
