"""
Value types for the contribution heatmap.

Entries are day-level (date, count) pairs. The cell sequence is built from
slots that are either a real date or an empty placeholder.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ContributionEntry:
    """A number of contributions made on one calendar day."""

    date: date
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(
                f"ContributionEntry count must be non-negative, got {self.count}"
            )

    def _key(self) -> tuple[int, int, int, int]:
        return (self.date.year, self.date.month, self.date.day, self.count)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ContributionEntry):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        day = date(self.date.year, self.date.month, self.date.day)
        return f"ContributionEntry({day.isoformat()}, {self.count})"


@dataclass(frozen=True)
class DateSlot:
    """A slot holding a real calendar day."""

    date: date


@dataclass(frozen=True)
class EmptySlot:
    """A padding or month-separator slot. Never looked up, never tapped."""


Slot = DateSlot | EmptySlot

EMPTY = EmptySlot()


@dataclass(frozen=True)
class DateRange:
    """
    The visible span of days.

    actual_first/actual_last are the data or override boundaries;
    aligned_first/aligned_last are those expanded to full weeks.
    """

    actual_first: date
    actual_last: date
    aligned_first: date
    aligned_last: date

    def __post_init__(self):
        if not (
            self.aligned_first
            <= self.actual_first
            <= self.actual_last
            <= self.aligned_last
        ):
            raise ValueError(
                "DateRange requires aligned_first <= actual_first <= "
                f"actual_last <= aligned_last, got {self.aligned_first}, "
                f"{self.actual_first}, {self.actual_last}, {self.aligned_last}"
            )
