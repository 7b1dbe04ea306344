"""
Day-level date helpers: normalization and week alignment.

Weekdays use ISO numbering throughout (1=Monday .. 7=Sunday).
"""

from datetime import date, datetime, timedelta

MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6
SUNDAY = 7

DAYS_PER_WEEK = 7


def day_key(value: date | datetime) -> date:
    """
    Normalize a date or timestamp to its calendar day.

    Only the year/month/day fields the caller supplies are kept. Time of day
    and any tzinfo are dropped without converting, so a DST transition can
    never move a timestamp onto a neighbouring day.

    Args:
        value: A date or datetime (naive or aware)

    Returns:
        A plain date usable as a lookup key
    """
    return date(value.year, value.month, value.day)


def validate_start_weekday(start_weekday: int) -> int:
    """
    Check a week-start day.

    Raises:
        ValueError: If start_weekday is outside 1..7
    """
    if isinstance(start_weekday, bool) or not isinstance(start_weekday, int):
        raise ValueError(f"start_weekday must be an int in 1..7, got {start_weekday!r}")
    if not MONDAY <= start_weekday <= SUNDAY:
        raise ValueError(
            f"start_weekday must be between {MONDAY} (Monday) and "
            f"{SUNDAY} (Sunday), got {start_weekday}"
        )
    return start_weekday


def week_position(value: date, start_weekday: int) -> int:
    """Row (0-6) that a day occupies in a week starting on start_weekday."""
    return (value.isoweekday() - start_weekday) % DAYS_PER_WEEK


def align_to_week_start(value: date | datetime, start_weekday: int) -> date:
    """
    Return the latest day on or before value that falls on start_weekday.

    Example:
        align_to_week_start(date(2024, 1, 17), MONDAY) -> date(2024, 1, 15)
    """
    validate_start_weekday(start_weekday)
    day = day_key(value)
    return day - timedelta(days=week_position(day, start_weekday))


def align_to_week_end(value: date | datetime, start_weekday: int) -> date:
    """Return the last day of the week containing value (week start + 6)."""
    return align_to_week_start(value, start_weekday) + timedelta(days=6)


def iter_days(first: date, last: date):
    """Yield every day from first to last inclusive."""
    cursor = first
    while cursor <= last:
        yield cursor
        cursor += timedelta(days=1)
