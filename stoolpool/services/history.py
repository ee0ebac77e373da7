"""History repositories.

History is kept in canonical chronological (append) order. A
latest-first view is produced at read time with :func:`latest_first` and
is never written back; indices from that view are mapped to canonical
indices with :func:`canonical_index`.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stoolpool.core.exceptions import EntryNotFoundError
from stoolpool.models.health_entry import HealthEntry
from stoolpool.schemas.result import ResultRecord


def resolve_index(index: int, length: int) -> int:
    """Normalize a (possibly negative) index into ``range(length)``."""
    resolved = index + length if index < 0 else index
    if not 0 <= resolved < length:
        raise EntryNotFoundError(
            f"No history entry at index {index} (history has {length} entries)"
        )
    return resolved


def canonical_index(display_index: int, length: int) -> int:
    """Map an index in the latest-first view to the stored index."""
    return length - 1 - resolve_index(display_index, length)


def latest_first(history: Sequence[ResultRecord]) -> list[ResultRecord]:
    """Return a newest-first copy of the history."""
    return list(reversed(history))


class HistoryRepository(ABC):
    """Storage for a user's result history."""

    @abstractmethod
    async def load(self) -> list[ResultRecord]:
        """Return all records, oldest first."""

    @abstractmethod
    async def append(self, record: ResultRecord) -> None:
        """Store a new record after all existing ones."""

    @abstractmethod
    async def remove(self, index: int) -> ResultRecord:
        """Delete and return the record at a canonical index.

        Raises:
            EntryNotFoundError: If no record exists at ``index``.
        """


class InMemoryHistoryRepository(HistoryRepository):
    """List-backed repository, used in tests and for on-device caches."""

    def __init__(self, records: Iterable[ResultRecord] = ()) -> None:
        self._records: list[ResultRecord] = list(records)

    async def load(self) -> list[ResultRecord]:
        return list(self._records)

    async def append(self, record: ResultRecord) -> None:
        self._records.append(record)

    async def remove(self, index: int) -> ResultRecord:
        return self._records.pop(resolve_index(index, len(self._records)))


class SqlHistoryRepository(HistoryRepository):
    """Repository backed by the ``health_entries`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load(self) -> list[ResultRecord]:
        result = await self.session.execute(
            select(HealthEntry).order_by(HealthEntry.id)
        )
        return [entry.to_record() for entry in result.scalars().all()]

    async def append(self, record: ResultRecord) -> None:
        self.session.add(HealthEntry.from_record(record))
        await self.session.commit()

    async def remove(self, index: int) -> ResultRecord:
        result = await self.session.execute(
            select(HealthEntry.id).order_by(HealthEntry.id)
        )
        entry_ids = list(result.scalars().all())
        entry_id = entry_ids[resolve_index(index, len(entry_ids))]

        entry = await self.session.get(HealthEntry, entry_id)
        record = entry.to_record()
        await self.session.delete(entry)
        await self.session.commit()
        return record
