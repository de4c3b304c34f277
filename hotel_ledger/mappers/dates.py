"""Pure calendar-date helpers for booking intervals.

No I/O, no side effects. Intervals are half-open: [check_in, check_out).
The time zone used to truncate timestamps is always passed in explicitly.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "UTC"


def get_timezone(name: str | None) -> ZoneInfo:
    """Return ZoneInfo for an IANA name. Falls back to UTC when empty."""
    return ZoneInfo((name or "").strip() or DEFAULT_TIMEZONE)


def to_calendar_date(value: date | datetime | None, tz: ZoneInfo) -> date | None:
    """Truncate a boundary value to a calendar date in *tz*.

    Aware datetimes are converted into *tz* first; naive datetimes are
    taken as already local to *tz*. Plain dates pass through unchanged.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def nights_between(check_in: date, check_out: date) -> int:
    return (check_out - check_in).days


def ranges_overlap(
    first_in: date, first_out: date, second_in: date, second_out: date,
) -> bool:
    """True if the two half-open ranges share at least one night.

    Back-to-back ranges (one ends the day the other starts) do not overlap.
    """
    return first_in < second_out and first_out > second_in
