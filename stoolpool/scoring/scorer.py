"""Stool observation scoring module.

Each answered question adds a weight from a fixed table:

- Color: White/Black 18, Yellow/Red 12, Green 4, Brown 0
- Consistency: Oily 6, Sticky 5, Watery 4, Lumpy 3, Hard/Mushy 2, Soft 1, Formed 0
- Smell: Very Foul 4, Foul 2, Normal 0
- Pain: before + during + after (each 0-10)
- Float/sink: Float 2, Sink 0, plus a weight per detail token

Notes are free text and never scored. Skipped questions and labels not
in a table add nothing.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from stoolpool.schemas.answers import AnswerRecord, FloatSinkAnswer

COLOR_WEIGHTS = {
    "White": 18,
    "Yellow": 12,
    "Green": 4,
    "Brown": 0,
    "Red": 12,
    "Black": 18,
}

CONSISTENCY_WEIGHTS = {
    "Hard": 2,
    "Lumpy": 3,
    "Formed": 0,
    "Soft": 1,
    "Mushy": 2,
    "Watery": 4,
    "Sticky": 5,
    "Oily": 6,
}

SMELL_WEIGHTS = {
    "Normal": 0,
    "Foul": 2,
    "Very Foul": 4,
}

FLOAT_WEIGHTS = {
    "Float": 2,
    "Sink": 0,
}

FLOAT_DETAIL_WEIGHTS = {
    # Float details
    "Foamy": 2,
    "Layered": 2,
    "Only top": 1,
    "Partial sink": 1,
    "Mixed density": 2,
    # Sink details
    "Sank fast": 0,
    "Sank slowly": 1,
    "Stuck to bowl": 2,
    "Fell in chunks": 1,
    "Dense solid": 0,
}

AnswersInput = Union[AnswerRecord, Mapping[str, Any], Sequence[Any]]


@dataclass
class StoolScoreResult:
    """Result of stool observation scoring."""
    total: int

    # Per-question contributions
    color: int
    consistency: int
    smell: int
    pain: int
    float_type: int
    float_details: int

    @property
    def items(self) -> dict[str, int]:
        return {
            "color": self.color,
            "consistency": self.consistency,
            "smell": self.smell,
            "pain": self.pain,
            "float_type": self.float_type,
            "float_details": self.float_details,
        }


def _float_contributions(answer: FloatSinkAnswer | None) -> tuple[int, int]:
    """Return (type weight, detail weight) for a float/sink answer."""
    if answer is None or not answer.delimited:
        return 0, 0

    type_weight = FLOAT_WEIGHTS.get(answer.kind, 0)
    detail_weight = sum(FLOAT_DETAIL_WEIGHTS.get(token, 0) for token in answer.details)
    return type_weight, detail_weight


def score_stool(answers: AnswersInput) -> StoolScoreResult:
    """Score a completed quiz.

    Args:
        answers: An AnswerRecord, a mapping of named answers, or the
                 legacy positional list of six answers.

    Returns:
        StoolScoreResult with the total and each question's contribution.

    Raises:
        TypeError: If ``answers`` is not a record, mapping or sequence.
    """
    record = AnswerRecord.coerce(answers)

    pain = record.pain.total if record.pain else 0
    float_type, float_details = _float_contributions(record.float_sink)

    items = {
        "color": COLOR_WEIGHTS.get(record.color, 0),
        "consistency": CONSISTENCY_WEIGHTS.get(record.consistency, 0),
        "smell": SMELL_WEIGHTS.get(record.smell, 0),
        "pain": pain,
        "float_type": float_type,
        "float_details": float_details,
    }

    return StoolScoreResult(total=sum(items.values()), **items)


def calculate_score(answers: AnswersInput) -> int:
    """Return the total severity score for a completed quiz."""
    return score_stool(answers).total
