"""Pydantic schemas for quiz answers and results."""

from stoolpool.schemas.answers import (
    ANSWER_FIELDS,
    AnswerRecord,
    FloatSinkAnswer,
    PainRating,
)
from stoolpool.schemas.result import ResultColor, ResultRecord, Tier

__all__ = [
    "ANSWER_FIELDS",
    "AnswerRecord",
    "FloatSinkAnswer",
    "PainRating",
    "ResultColor",
    "ResultRecord",
    "Tier",
]
