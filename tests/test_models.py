"""
Tests for the heatmap value types.
"""

from datetime import date, datetime

import pytest

from contribution_heatmap.models import (
    EMPTY,
    ContributionEntry,
    DateRange,
    DateSlot,
    EmptySlot,
)


class TestContributionEntry:
    """Tests for ContributionEntry."""

    def test_negative_count_fails_fast(self):
        """A negative count is rejected at construction."""
        with pytest.raises(ValueError, match="non-negative"):
            ContributionEntry(date(2024, 1, 15), -1)

    def test_zero_count_is_allowed(self):
        entry = ContributionEntry(date(2024, 1, 15), 0)
        assert entry.count == 0

    def test_equality_ignores_time_of_day(self):
        """Entries on the same day with the same count are equal."""
        morning = ContributionEntry(datetime(2024, 1, 15, 8, 0), 5)
        evening = ContributionEntry(datetime(2024, 1, 15, 20, 30), 5)

        assert morning == evening
        assert hash(morning) == hash(evening)

    def test_same_day_different_count_is_distinct(self):
        """Entries are not aggregated: a different count is a different value."""
        assert ContributionEntry(date(2024, 1, 15), 1) != ContributionEntry(date(2024, 1, 15), 2)

    def test_str_shows_day_and_count(self):
        entry = ContributionEntry(datetime(2024, 1, 15, 14, 30), 5)
        assert str(entry) == "ContributionEntry(2024-01-15, 5)"

    def test_entries_are_immutable(self):
        entry = ContributionEntry(date(2024, 1, 15), 5)
        with pytest.raises(AttributeError):
            entry.count = 6


class TestSlots:
    """Tests for the slot variants."""

    def test_date_slot_holds_date(self):
        slot = DateSlot(date(2024, 1, 1))
        assert slot.date == date(2024, 1, 1)

    def test_empty_slots_are_equal(self):
        assert EmptySlot() == EMPTY
        assert not isinstance(EMPTY, DateSlot)


class TestDateRange:
    """Tests for the DateRange ordering invariant."""

    def test_valid_range(self):
        date_range = DateRange(
            actual_first=date(2024, 1, 3),
            actual_last=date(2024, 1, 10),
            aligned_first=date(2024, 1, 1),
            aligned_last=date(2024, 1, 14),
        )
        assert date_range.aligned_first == date(2024, 1, 1)

    def test_misordered_range_rejected(self):
        with pytest.raises(ValueError):
            DateRange(
                actual_first=date(2024, 1, 10),
                actual_last=date(2024, 1, 3),
                aligned_first=date(2024, 1, 1),
                aligned_last=date(2024, 1, 14),
            )
