"""
Resolve the visible date range for a heatmap.
"""

import logging
from datetime import date, timedelta

from contribution_heatmap.date_utils import (
    align_to_week_end,
    align_to_week_start,
    day_key,
)
from contribution_heatmap.models import ContributionEntry, DateRange

logger = logging.getLogger(__name__)

FALLBACK_DAYS = 365


def resolve_actual_range(
    entries: list[ContributionEntry],
    min_date: date | None = None,
    max_date: date | None = None,
    today: date | None = None,
) -> tuple[date, date]:
    """
    Determine the first and last day to display.

    Explicit bounds win. A missing bound is derived from the entries. With no
    entries and no bounds at all, the last 365 days ending today are shown.

    Args:
        entries: Contribution entries (may be empty)
        min_date: Optional explicit first day
        max_date: Optional explicit last day
        today: Override for today's date (for testing)

    Returns:
        (actual_first, actual_last) as day keys
    """
    if not entries and min_date is None and max_date is None:
        last = day_key(today if today is not None else date.today())
        logger.debug("No entries or bounds, falling back to %d days ending %s", FALLBACK_DAYS, last)
        return last - timedelta(days=FALLBACK_DAYS), last

    days = [day_key(entry.date) for entry in entries]

    if min_date is not None:
        first = day_key(min_date)
    elif days:
        first = min(days)
    else:
        first = day_key(max_date)

    if max_date is not None:
        last = day_key(max_date)
    elif days:
        last = max(days)
    else:
        last = first

    # A lone bound on the far side of every entry collapses onto that bound
    if last < first:
        if max_date is not None and min_date is None:
            logger.debug("Range start %s follows end %s, collapsing to end", first, last)
            first = last
        else:
            logger.debug("Range end %s precedes start %s, collapsing to start", last, first)
            last = first

    return first, last


def resolve_range(
    entries: list[ContributionEntry],
    start_weekday: int,
    min_date: date | None = None,
    max_date: date | None = None,
    today: date | None = None,
) -> DateRange:
    """
    Resolve the actual range and expand it outward to full weeks.

    Returns:
        DateRange with both the unaligned and week-aligned boundaries
    """
    first, last = resolve_actual_range(entries, min_date, max_date, today)
    return DateRange(
        actual_first=first,
        actual_last=last,
        aligned_first=align_to_week_start(first, start_weekday),
        aligned_last=align_to_week_end(last, start_weekday),
    )
