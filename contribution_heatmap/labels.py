"""
Decide which weekday rows and which columns get labels.
"""

from dataclasses import dataclass
from enum import Enum

from contribution_heatmap.date_utils import (
    DAYS_PER_WEEK,
    FRIDAY,
    MONDAY,
    WEDNESDAY,
    validate_start_weekday,
)
from contribution_heatmap.localizations import month_abbreviation, weekday_short_names
from contribution_heatmap.models import DateSlot, Slot
from contribution_heatmap.sequence_builder import column_count


class WeekdayLabel(str, Enum):
    """Which weekday labels to display."""

    NONE = "none"
    GITHUB_LIKE = "github_like"  # Monday, Wednesday and Friday only
    FULL = "full"


@dataclass(frozen=True)
class MonthLabel:
    """A month label anchored above a grid column."""

    column: int
    month: int
    text: str


@dataclass(frozen=True)
class WeekdayLabelRow:
    """A weekday label anchored beside a grid row."""

    row: int
    text: str


def rotated_weekday_names(locale: str | None, start_weekday: int) -> list[str]:
    """
    Seven weekday short names in display order, starting at start_weekday.

    Example:
        rotated_weekday_names("en", SUNDAY)[0] -> "Sun"
    """
    validate_start_weekday(start_weekday)
    names = weekday_short_names(locale)
    rotate_by = (start_weekday - MONDAY) % DAYS_PER_WEEK
    return [names[(i + rotate_by) % DAYS_PER_WEEK] for i in range(DAYS_PER_WEEK)]


def github_like_rows(start_weekday: int) -> list[int]:
    """Rows holding Monday, Wednesday and Friday for a given week start."""
    validate_start_weekday(start_weekday)
    return sorted(
        (weekday - start_weekday) % DAYS_PER_WEEK
        for weekday in (MONDAY, WEDNESDAY, FRIDAY)
    )


def plan_weekday_labels(
    mode: WeekdayLabel | str,
    locale: str | None,
    start_weekday: int,
) -> list[WeekdayLabelRow]:
    """
    Weekday labels to paint for a label mode.

    Returns:
        One WeekdayLabelRow per labelled row, top to bottom
    """
    mode = WeekdayLabel(mode)
    if mode == WeekdayLabel.NONE:
        return []

    names = rotated_weekday_names(locale, start_weekday)
    if mode == WeekdayLabel.GITHUB_LIKE:
        rows = github_like_rows(start_weekday)
    else:
        rows = list(range(DAYS_PER_WEEK))

    return [WeekdayLabelRow(row=row, text=names[row]) for row in rows]


def is_first_week_of_month(day) -> bool:
    """True when day falls within the first 7 days of its month."""
    return day.day <= DAYS_PER_WEEK


def first_date_in_column(sequence: tuple[Slot, ...], column: int):
    """First real date in a column, or None for an all-empty column."""
    start = column * DAYS_PER_WEEK
    for slot in sequence[start:start + DAYS_PER_WEEK]:
        if isinstance(slot, DateSlot):
            return slot.date
    return None


def plan_month_labels(
    sequence: tuple[Slot, ...],
    locale: str | None = None,
) -> list[MonthLabel]:
    """
    Scan columns left to right and label the first column of each month.

    A column is labelled when its first real date belongs to a month other
    than the last labelled one and lies within the first week of that month.
    All-empty separator columns are skipped.
    """
    labels = []
    last_labeled_month = None

    for column in range(column_count(sequence)):
        first_date = first_date_in_column(sequence, column)
        if first_date is None:
            continue

        if first_date.month != last_labeled_month and is_first_week_of_month(first_date):
            labels.append(
                MonthLabel(
                    column=column,
                    month=first_date.month,
                    text=month_abbreviation(first_date.month, locale),
                )
            )
            last_labeled_month = first_date.month

    return labels
