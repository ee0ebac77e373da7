"""Domain exceptions."""


class StoolPoolError(Exception):
    """Base exception for journal errors."""

    pass


class InvalidAnswerError(StoolPoolError, ValueError):
    """Raised when an answer value is outside its allowed range."""

    pass


class EntryNotFoundError(StoolPoolError, IndexError):
    """Raised when a history index does not refer to an entry."""

    pass
