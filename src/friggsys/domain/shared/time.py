"""Time utilities for the domain layer."""

from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def advance_from(previous: datetime) -> datetime:
    """Return the current UTC time, strictly later than ``previous``.

    Two mutations inside the same clock tick would otherwise share a
    timestamp; the result is nudged forward by one microsecond instead.
    """
    now = utc_now()
    previous = ensure_tz_aware(previous)
    if now <= previous:
        return previous + _TICK
    return now
