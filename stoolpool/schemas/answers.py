"""Pydantic schemas for quiz answers.

A completed quiz is six questions, historically stored as a positional
list::

    [color, consistency, smell, {before, during, after}, "Float: a, b", notes]

``AnswerRecord`` gives each position a name. Any question may be skipped;
skipped answers are ``None``.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from stoolpool.core.exceptions import InvalidAnswerError

# Positional order used by the quiz and by legacy storage
ANSWER_FIELDS = ("color", "consistency", "smell", "pain", "float_sink", "notes")

COLOR_LABELS = ("White", "Yellow", "Green", "Brown", "Red", "Black")
CONSISTENCY_LABELS = (
    "Hard",
    "Lumpy",
    "Formed",
    "Soft",
    "Mushy",
    "Watery",
    "Sticky",
    "Oily",
)
SMELL_LABELS = ("Normal", "Foul", "Very Foul")
FLOAT_DETAIL_OPTIONS = {
    "Float": ("Foamy", "Layered", "Only top", "Partial sink", "Mixed density"),
    "Sink": ("Sank fast", "Sank slowly", "Stuck to bowl", "Fell in chunks", "Dense solid"),
}

PAIN_MIN = 0
PAIN_MAX = 10


class PainRating(BaseModel):
    """Pain or cramping rated before, during and after, each 0-10.

    A sub-field that is missing, non-numeric, fractional or outside the
    0-10 scale contributes 0 rather than rejecting the whole answer.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    before: int = Field(default=0, ge=PAIN_MIN, le=PAIN_MAX)
    during: int = Field(default=0, ge=PAIN_MIN, le=PAIN_MAX)
    after: int = Field(default=0, ge=PAIN_MIN, le=PAIN_MAX)

    @field_validator("before", "during", "after", mode="before")
    @classmethod
    def _malformed_is_zero(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        if not PAIN_MIN <= value <= PAIN_MAX or value != int(value):
            return 0
        return int(value)

    @property
    def total(self) -> int:
        return self.before + self.during + self.after

    @property
    def average(self) -> float:
        return self.total / 3


class FloatSinkAnswer(BaseModel):
    """Float/sink answer with its detail tokens.

    Stored as ``"<Type>: <detail, detail>"``. ``delimited`` is False when
    the source text had no ``:`` separator; such answers still name a
    type for statistics but carry no score. ``text`` keeps the source
    string so storage writes back exactly what was answered.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    kind: str
    details: tuple[str, ...] = ()
    delimited: bool = True
    text: str | None = None

    @classmethod
    def parse(cls, text: str) -> "FloatSinkAnswer | None":
        """Parse the compound string form. Blank text returns None."""
        if not text.strip():
            return None
        if ":" not in text:
            return cls(kind=text.strip(), delimited=False, text=text)

        # Only the segment between the first and second separator is read
        parts = text.split(":")
        details = tuple(token.strip() for token in parts[1].split(","))
        return cls(
            kind=parts[0].strip(),
            details=tuple(d for d in details if d),
            text=text,
        )

    def to_text(self) -> str:
        if self.text is not None:
            return self.text
        if not self.delimited:
            return self.kind
        return f"{self.kind}: {', '.join(self.details)}"


def _blank_to_none(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value


class AnswerRecord(BaseModel):
    """One completed quiz with named answers."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    color: str | None = None
    consistency: str | None = None
    smell: str | None = None
    pain: PainRating | None = None
    float_sink: FloatSinkAnswer | None = None
    notes: str | None = None

    @field_validator("color", "consistency", "smell", "notes", mode="before")
    @classmethod
    def _skipped_text(cls, value: Any) -> str | None:
        return _blank_to_none(value)

    @field_validator("pain", mode="before")
    @classmethod
    def _pain_object(cls, value: Any) -> Any:
        # Anything other than a rating object counts as a skipped question
        if isinstance(value, (PainRating, Mapping)):
            return value
        return None

    @field_validator("float_sink", mode="before")
    @classmethod
    def _float_sink_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return FloatSinkAnswer.parse(value)
        if isinstance(value, FloatSinkAnswer):
            return value
        if isinstance(value, Mapping) and isinstance(value.get("kind"), str):
            details = value.get("details")
            if not isinstance(details, (list, tuple)):
                details = ()
            return FloatSinkAnswer(
                kind=value["kind"],
                details=tuple(d for d in details if isinstance(d, str)),
                delimited=value.get("delimited", True) is not False,
            )
        return None

    @classmethod
    def from_positional(cls, values: Sequence[Any]) -> "AnswerRecord":
        """Build a record from the legacy positional list.

        Short lists are padded with skipped answers; extra entries are
        ignored.

        Raises:
            TypeError: If ``values`` is not a list-like sequence.
            InvalidAnswerError: If an answer sub-record cannot be built.
        """
        if (
            isinstance(values, (str, bytes, Mapping))
            or not isinstance(values, Sequence)
        ):
            raise TypeError(
                f"Answers must be a sequence, got {type(values).__name__}"
            )

        padded = list(values[: len(ANSWER_FIELDS)])
        padded += [None] * (len(ANSWER_FIELDS) - len(padded))
        return cls._validated(dict(zip(ANSWER_FIELDS, padded)))

    @classmethod
    def coerce(cls, value: Any) -> "AnswerRecord":
        """Accept a record, a mapping of named answers, or a positional list."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls._validated(dict(value))
        return cls.from_positional(value)

    @classmethod
    def _validated(cls, data: dict[str, Any]) -> "AnswerRecord":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidAnswerError(str(exc)) from exc

    def to_positional(self) -> list[Any]:
        """Return the legacy positional list used for storage."""
        return [
            self.color,
            self.consistency,
            self.smell,
            self.pain.model_dump() if self.pain else None,
            self.float_sink.to_text() if self.float_sink else None,
            self.notes,
        ]

    @property
    def float_type(self) -> str | None:
        if self.float_sink is None or not self.float_sink.kind:
            return None
        return self.float_sink.kind
