"""Time and datetime utilities."""

from datetime import datetime, timezone
from typing import Any


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, leave aware datetimes untouched."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_datetime(dt: datetime, fmt: str = "%Y-%m-%dT%H:%M:%SZ") -> str:
    """Format datetime to ISO string.

    Args:
        dt: Datetime to format
        fmt: Format string (default ISO 8601)

    Returns:
        Formatted datetime string
    """
    return ensure_aware(dt).strftime(fmt)


def format_short_date(dt: datetime) -> str:
    """Format a datetime as a short chart label, e.g. ``Oct 19``."""
    return f"{dt:%b} {dt.day}"


def parse_datetime(dt_str: str) -> datetime:
    """Parse a stored entry timestamp.

    Accepts ISO 8601 (as written by the journal and by JavaScript's
    ``toISOString``) and the en-US ``toLocaleString`` form found in
    entries saved on-device, e.g. ``10/19/2026, 8:05:13 AM``.

    Args:
        dt_str: Datetime string

    Returns:
        Parsed datetime object in UTC

    Raises:
        ValueError: If no known format matches
    """
    formats = [
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%S.%f%z",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M:%S.%f",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d %H:%M:%S.%f",
        "%m/%d/%Y, %I:%M:%S %p",
        "%m/%d/%Y %I:%M:%S %p",
        "%m/%d/%Y, %H:%M:%S",
        "%Y-%m-%d",
    ]

    # Newer ICU builds put a narrow no-break space before AM/PM
    text = dt_str.replace("\u202f", " ").strip()
    for fmt in formats:
        try:
            return ensure_aware(datetime.strptime(text, fmt))
        except ValueError:
            continue

    raise ValueError(f"Could not parse datetime: {dt_str}")


def coerce_datetime(value: Any) -> datetime | None:
    """Resolve a stored date value to an aware datetime.

    Returns None for missing or unparseable values instead of raising.
    """
    if isinstance(value, datetime):
        return ensure_aware(value)
    if isinstance(value, str) and value.strip():
        try:
            return parse_datetime(value)
        except ValueError:
            return None
    return None
