"""
Build the ordered cell sequence that the grid renders.

The sequence is read in columns of 7 slots: column = index // 7,
row = index % 7.
"""

import math

from contribution_heatmap.date_utils import DAYS_PER_WEEK, iter_days, week_position
from contribution_heatmap.models import EMPTY, DateRange, DateSlot, Slot


def build_sequence(
    date_range: DateRange,
    start_weekday: int,
    split_month_view: bool = False,
) -> tuple[Slot, ...]:
    """
    Build the cell sequence for a resolved date range.

    Args:
        date_range: Resolved range from resolve_range()
        start_weekday: First day of the week (1=Monday .. 7=Sunday)
        split_month_view: Insert a blank column between consecutive months

    Returns:
        Tuple of DateSlot/EmptySlot, length a multiple of 7
    """
    if split_month_view:
        return build_split_month_sequence(date_range, start_weekday)
    return build_continuous_sequence(date_range)


def build_continuous_sequence(date_range: DateRange) -> tuple[Slot, ...]:
    """Every day from aligned_first to aligned_last, no empty slots."""
    return tuple(
        DateSlot(day) for day in iter_days(date_range.aligned_first, date_range.aligned_last)
    )


def build_split_month_sequence(
    date_range: DateRange, start_weekday: int
) -> tuple[Slot, ...]:
    """
    Lay out the actual range with one blank column before each new month.

    Leading empties put the first day on its weekday row, and trailing
    empties complete the final column.
    """
    slots: list[Slot] = []

    leading = week_position(date_range.actual_first, start_weekday)
    slots.extend([EMPTY] * leading)

    previous_month = None
    for day in iter_days(date_range.actual_first, date_range.actual_last):
        if previous_month is not None and previous_month != day.month:
            slots.extend([EMPTY] * DAYS_PER_WEEK)
        slots.append(DateSlot(day))
        previous_month = day.month

    trailing = (DAYS_PER_WEEK - 1) - week_position(date_range.actual_last, start_weekday)
    slots.extend([EMPTY] * trailing)

    return tuple(slots)


def column_count(sequence) -> int:
    """Number of 7-slot columns needed for a sequence."""
    return math.ceil(len(sequence) / DAYS_PER_WEEK)
