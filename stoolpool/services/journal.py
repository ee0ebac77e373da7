"""Journal service: record quizzes, manage history, compute stats."""

import logging
from datetime import datetime
from typing import Optional

from stoolpool.core.config import Settings, settings as default_settings
from stoolpool.core.logging import audit_logger
from stoolpool.schemas.answers import AnswerRecord
from stoolpool.schemas.result import ResultRecord
from stoolpool.scoring.aggregator import StatsSummary, aggregate
from stoolpool.scoring.classifier import classify
from stoolpool.scoring.scorer import AnswersInput, calculate_score
from stoolpool.services.history import HistoryRepository, canonical_index, latest_first
from stoolpool.utils.time import utc_now

logger = logging.getLogger(__name__)


def build_result(answers: AnswersInput, now: Optional[datetime] = None) -> ResultRecord:
    """Score and classify a completed quiz into a result record.

    Args:
        answers: Completed quiz answers (record, mapping or positional list).
        now: Timestamp for the entry, UTC now if omitted.

    Returns:
        ResultRecord ready to append to history.
    """
    record = AnswerRecord.coerce(answers)
    score = calculate_score(record)
    classification = classify(score)

    return ResultRecord(
        date=now or utc_now(),
        answers=record,
        score=score,
        result=classification.message,
        color=classification.color,
    )


class JournalService:
    """Service wiring the scoring core to a history repository.

    Handles:
    - Recording a completed quiz
    - Listing history in stored or latest-first order
    - Deleting entries by stored or displayed index
    - Dashboard statistics
    """

    def __init__(
        self,
        repository: HistoryRepository,
        settings: Settings | None = None,
    ) -> None:
        self.repository = repository
        self.settings = settings or default_settings

    async def record(
        self,
        answers: AnswersInput,
        now: Optional[datetime] = None,
    ) -> ResultRecord:
        """Score a completed quiz and append it to history."""
        result = build_result(answers, now)
        await self.repository.append(result)

        audit_logger.log(
            action="entry_recorded",
            entity_type="health_entry",
            entity_id=str(result.date),
            metadata={"score": result.score, "color": result.color.value},
        )
        return result

    async def history(self, latest_first_order: bool = False) -> list[ResultRecord]:
        """Return history, oldest first unless ``latest_first_order``."""
        records = await self.repository.load()
        if latest_first_order:
            return latest_first(records)
        return records

    async def delete(self, index: int, latest_first_order: bool = False) -> ResultRecord:
        """Delete an entry.

        Args:
            index: Position in stored order, or in the latest-first view
                   when ``latest_first_order`` is set.

        Raises:
            EntryNotFoundError: If the index does not refer to an entry.
        """
        if latest_first_order:
            records = await self.repository.load()
            index = canonical_index(index, len(records))

        removed = await self.repository.remove(index)
        audit_logger.log(
            action="entry_deleted",
            entity_type="health_entry",
            entity_id=str(removed.date),
            metadata={"index": index},
        )
        return removed

    async def stats(self, now: Optional[datetime] = None) -> StatsSummary:
        """Compute dashboard statistics over the full history."""
        records = await self.repository.load()
        summary = aggregate(
            records,
            now=now,
            window_days=self.settings.stats_window_days,
            trend_size=self.settings.stats_trend_size,
        )
        logger.debug(
            f"Stats computed over {summary.total_count} entries "
            f"({summary.weekly_count} in the last {self.settings.stats_window_days} days)"
        )
        return summary
