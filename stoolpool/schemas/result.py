"""Pydantic schemas for scored quiz results."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stoolpool.schemas.answers import AnswerRecord


class Tier(str, Enum):
    """Severity tier, ordered from least to most severe."""

    GOOD = "good"
    MODERATE = "moderate"
    WARNING = "warning"
    CRITICAL = "critical"


class ResultColor(str, Enum):
    """Display color attached to each tier."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    BLACK = "black"


class ResultRecord(BaseModel):
    """A completed, scored quiz as kept in history.

    ``date`` is normally an aware datetime. Entries carried over from
    on-device storage may hold the original date string (or nothing);
    those are resolved only when statistics need them.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime | str | None = None
    answers: AnswerRecord = Field(default_factory=AnswerRecord)
    score: int = Field(ge=0)
    result: str
    color: ResultColor

    @field_validator("answers", mode="before")
    @classmethod
    def _legacy_answers(cls, value: Any) -> Any:
        if value is None:
            return AnswerRecord()
        if isinstance(value, (list, tuple)):
            return AnswerRecord.from_positional(value)
        return value
