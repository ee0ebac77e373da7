"""Dashboard statistics over a user's history.

All computations are pure: the history is read, never modified. Records
are put into chronological order by their date before anything
order-dependent is computed, since stored list order is not trusted.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from stoolpool.schemas.result import ResultRecord
from stoolpool.utils.time import coerce_datetime, ensure_aware, format_short_date, utc_now

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
DEFAULT_WINDOW_DAYS = 7
DEFAULT_TREND_SIZE = 7


@dataclass(frozen=True)
class TrendPoint:
    """One entry on the score trend chart."""
    label: str
    score: int
    color: str


@dataclass
class StatsSummary:
    """Statistics rendered on the dashboard and profile screens."""
    total_count: int
    last_entry: Optional[ResultRecord]
    most_common_result: Optional[str]

    # Most frequent answer per question
    most_common_color: str
    most_common_consistency: str
    most_common_smell: str
    most_common_float: str

    average_pain: float
    average_score: float

    # Date-windowed
    weekly_count: int
    daily_average: float
    streak: int
    trend: list[TrendPoint] = field(default_factory=list)


def entry_datetime(record: ResultRecord) -> datetime | None:
    """Resolve a record's date, or None if it is missing or unparseable."""
    resolved = coerce_datetime(record.date)
    if resolved is None:
        logger.debug(f"Unparseable entry date: {record.date!r}")
    return resolved


def chronological(history: Sequence[ResultRecord]) -> list[ResultRecord]:
    """Return records oldest first.

    Sorting is stable: records with equal dates keep their list order.
    Undated records sort before all dated ones.
    """
    earliest = datetime.min.replace(tzinfo=timezone.utc)
    return sorted(history, key=lambda record: entry_datetime(record) or earliest)


def most_common(values: Iterable[str]) -> str:
    """Most frequent value; ties go to the first one encountered."""
    counts = Counter(values)
    if not counts:
        return NOT_AVAILABLE
    # max() keeps the first maximal key and Counter iterates in insertion order
    return max(counts, key=counts.__getitem__)


def count_since(dates: Iterable[datetime], since: datetime) -> int:
    """Count dates at or after ``since``."""
    return sum(1 for dt in dates if dt >= since)


def compute_streak(days: Iterable[date], today: date) -> int:
    """Number of consecutive logged days ending today.

    A streak is not broken until a full day passes without an entry, so
    when nothing is logged today the count starts from yesterday.
    """
    logged = set(days)
    cursor = today if today in logged else today - timedelta(days=1)

    streak = 0
    while cursor in logged:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def aggregate(
    history: Sequence[ResultRecord],
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    trend_size: int = DEFAULT_TREND_SIZE,
) -> StatsSummary:
    """Compute dashboard statistics.

    Args:
        history: Result records in any order.
        now: Reference time for the weekly window and streak (UTC now
             if omitted; naive values are taken as UTC).
        window_days: Length of the trailing window for ``weekly_count``.
        trend_size: Number of most recent records on the trend chart.

    Returns:
        StatsSummary. Empty history yields zero counts and "N/A" values.
    """
    now = ensure_aware(now) if now is not None else utc_now()
    ordered = chronological(history)

    dated = []
    for record in ordered:
        resolved = entry_datetime(record)
        if resolved is not None:
            dated.append(resolved.astimezone(now.tzinfo))

    answers = [record.answers for record in ordered]
    pain_averages = [a.pain.average for a in answers if a.pain is not None]

    weekly_count = count_since(dated, now - timedelta(days=window_days))

    recent = ordered[-trend_size:] if trend_size > 0 else []
    trend = []
    for record in recent:
        resolved = entry_datetime(record)
        label = (
            format_short_date(resolved.astimezone(now.tzinfo))
            if resolved is not None
            else NOT_AVAILABLE
        )
        trend.append(TrendPoint(label=label, score=record.score, color=record.color.value))

    return StatsSummary(
        total_count=len(ordered),
        last_entry=ordered[-1] if ordered else None,
        most_common_result=(
            most_common(record.result for record in ordered) if ordered else None
        ),
        most_common_color=most_common(a.color for a in answers if a.color),
        most_common_consistency=most_common(
            a.consistency for a in answers if a.consistency
        ),
        most_common_smell=most_common(a.smell for a in answers if a.smell),
        most_common_float=most_common(a.float_type for a in answers if a.float_type),
        average_pain=_mean(pain_averages),
        average_score=_mean([record.score for record in ordered]),
        weekly_count=weekly_count,
        daily_average=weekly_count / window_days if window_days > 0 else 0.0,
        streak=compute_streak((dt.date() for dt in dated), now.date()),
        trend=trend,
    )
