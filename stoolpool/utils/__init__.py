"""Utility functions."""

from stoolpool.utils.time import (
    coerce_datetime,
    ensure_aware,
    format_datetime,
    format_short_date,
    parse_datetime,
    utc_now,
)

__all__ = [
    "utc_now",
    "ensure_aware",
    "format_datetime",
    "format_short_date",
    "parse_datetime",
    "coerce_datetime",
]
