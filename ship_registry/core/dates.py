"""
Epoch-millisecond <-> calendar date conversions.

Clients send and receive production dates as epoch milliseconds. All
conversions are done in UTC; arithmetic on the epoch avoids platform limits
of ``datetime.fromtimestamp`` for far-future years.
"""
from datetime import date, datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def date_from_millis(millis: float) -> date:
    """
    UTC calendar date containing the given epoch-millisecond instant.
    Instants outside years 1..9999 clamp to ``date.min`` / ``date.max``.
    """
    try:
        return (EPOCH + timedelta(milliseconds=millis)).date()
    except OverflowError:
        return date.min if millis < 0 else date.max


def millis_from_date(value: date) -> int:
    """Epoch milliseconds of UTC midnight on ``value``."""
    midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return (midnight - EPOCH) // timedelta(milliseconds=1)
