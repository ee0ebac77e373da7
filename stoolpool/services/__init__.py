"""Business logic services."""

from stoolpool.services.history import (
    HistoryRepository,
    InMemoryHistoryRepository,
    SqlHistoryRepository,
    canonical_index,
    latest_first,
)
from stoolpool.services.journal import JournalService, build_result

__all__ = [
    "HistoryRepository",
    "InMemoryHistoryRepository",
    "SqlHistoryRepository",
    "canonical_index",
    "latest_first",
    "JournalService",
    "build_result",
]
