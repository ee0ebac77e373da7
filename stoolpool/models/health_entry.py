"""Health entry model for stored quiz results."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stoolpool.db.base import Base, TimestampMixin
from stoolpool.schemas.result import ResultRecord
from stoolpool.utils.time import coerce_datetime, ensure_aware


class HealthEntry(Base, TimestampMixin):
    """One scored quiz in a user's history.

    The autoincrement id fixes append order; history loads ordered by id.
    Answers are kept in the legacy positional form.
    """

    __tablename__ = "health_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # When the quiz was taken
    date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
    )
    # Original date text for imported entries whose date could not be parsed
    date_text: Mapped[str | None] = mapped_column(String(100), nullable=True)
    answers: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    result: Mapped[str] = mapped_column(String(255), nullable=False)
    # green, yellow, red or black
    color: Mapped[str] = mapped_column(String(20), nullable=False)

    @classmethod
    def from_record(cls, record: ResultRecord) -> "HealthEntry":
        """Build a row from a result record."""
        resolved = coerce_datetime(record.date)
        date_text = None
        if resolved is None and isinstance(record.date, str):
            date_text = record.date
        return cls(
            date=resolved,
            date_text=date_text,
            answers=record.answers.to_positional(),
            score=record.score,
            result=record.result,
            color=record.color.value,
        )

    def to_record(self) -> ResultRecord:
        """Rebuild the result record."""
        # SQLite returns naive datetimes; stored values are UTC
        entry_date = ensure_aware(self.date) if self.date is not None else self.date_text
        return ResultRecord(
            date=entry_date,
            answers=self.answers,
            score=self.score,
            result=self.result,
            color=self.color,
        )

    def __repr__(self) -> str:
        return f"<HealthEntry {self.id} score={self.score} ({self.color})>"
