"""
Tests for the cell sequence builder.
"""

from datetime import date, timedelta

import pytest

from contribution_heatmap.date_range import resolve_range
from contribution_heatmap.date_utils import MONDAY, SUNDAY
from contribution_heatmap.models import EMPTY, ContributionEntry, DateSlot
from contribution_heatmap.sequence_builder import build_sequence, column_count


def _range(first, last, start_weekday=MONDAY):
    return resolve_range([], start_weekday, min_date=first, max_date=last)


class TestContinuousSequence:
    """Tests for continuous (non-split) mode."""

    def test_every_day_from_aligned_first_to_aligned_last(self):
        date_range = _range(date(2025, 12, 1), date(2025, 12, 31))
        sequence = build_sequence(date_range, MONDAY)

        assert len(sequence) == 35
        assert sequence[0] == DateSlot(date(2025, 12, 1))
        assert sequence[-1] == DateSlot(date(2026, 1, 4))
        assert all(isinstance(slot, DateSlot) for slot in sequence)

    def test_days_are_consecutive(self):
        sequence = build_sequence(_range(date(2024, 2, 20), date(2024, 3, 10)), MONDAY)
        days = [slot.date for slot in sequence]
        for previous, current in zip(days, days[1:]):
            assert current - previous == timedelta(days=1)

    def test_length_is_positive_multiple_of_seven(self):
        for start_weekday in range(1, 8):
            for span in (0, 1, 6, 7, 30, 365):
                first = date(2024, 1, 10)
                date_range = _range(first, first + timedelta(days=span), start_weekday)
                sequence = build_sequence(date_range, start_weekday)
                assert len(sequence) > 0
                assert len(sequence) % 7 == 0

    def test_single_aligned_day_is_one_column(self):
        # 2024-01-01 is a Monday
        sequence = build_sequence(_range(date(2024, 1, 1), date(2024, 1, 1)), MONDAY)
        assert len(sequence) == 7
        assert column_count(sequence) == 1


class TestSplitMonthSequence:
    """Tests for split-month mode."""

    def test_single_aligned_day_is_one_column(self):
        date_range = _range(date(2024, 1, 1), date(2024, 1, 1))
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)

        assert len(sequence) == 7
        assert sequence[0] == DateSlot(date(2024, 1, 1))
        assert sequence[1:] == (EMPTY,) * 6

    def test_one_separator_block_between_months(self):
        """A Dec 31 -> Jan 1 boundary gets exactly seven empty slots."""
        entries = [
            ContributionEntry(date(2025, 12, 31), 3),
            ContributionEntry(date(2026, 1, 1), 4),
        ]
        date_range = resolve_range(entries, MONDAY)
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)

        dec_31 = sequence.index(DateSlot(date(2025, 12, 31)))
        jan_1 = sequence.index(DateSlot(date(2026, 1, 1)))

        assert jan_1 - dec_31 == 8
        assert sequence[dec_31 + 1:jan_1] == (EMPTY,) * 7

    def test_leading_empties_place_first_day_on_its_row(self):
        # 2025-12-31 is a Wednesday: row 2 with a Monday start
        date_range = _range(date(2025, 12, 31), date(2026, 1, 1))
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)

        assert sequence[:2] == (EMPTY, EMPTY)
        assert sequence[2] == DateSlot(date(2025, 12, 31))

    def test_trailing_empties_complete_last_column(self):
        # 2026-01-01 is a Thursday: row 3, so three trailing empties
        date_range = _range(date(2025, 12, 31), date(2026, 1, 1))
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)

        assert len(sequence) == 14
        assert sequence[-3:] == (EMPTY,) * 3
        assert sequence[10] == DateSlot(date(2026, 1, 1))

    def test_rows_match_weekdays_after_separators(self):
        """Every real date sits on the row of its weekday."""
        date_range = _range(date(2024, 1, 20), date(2024, 4, 10), SUNDAY)
        sequence = build_sequence(date_range, SUNDAY, split_month_view=True)

        for index, slot in enumerate(sequence):
            if isinstance(slot, DateSlot):
                assert index % 7 == (slot.date.isoweekday() - SUNDAY) % 7

    def test_length_is_multiple_of_seven(self):
        for start_weekday in range(1, 8):
            date_range = _range(date(2024, 1, 20), date(2024, 4, 10), start_weekday)
            sequence = build_sequence(date_range, start_weekday, split_month_view=True)
            assert len(sequence) % 7 == 0

    def test_month_ending_on_last_row_yields_empty_column(self):
        # 2024-03-31 is a Sunday, the last row for a Monday start
        date_range = _range(date(2024, 3, 25), date(2024, 4, 2))
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)

        assert len(sequence) == 21
        assert sequence[7:14] == (EMPTY,) * 7
        assert sequence[14] == DateSlot(date(2024, 4, 1))

    def test_split_covers_only_actual_range(self):
        date_range = _range(date(2024, 1, 3), date(2024, 1, 5))
        sequence = build_sequence(date_range, MONDAY, split_month_view=True)
        days = [slot.date for slot in sequence if isinstance(slot, DateSlot)]
        assert days == [date(2024, 1, 3), date(2024, 1, 4), date(2024, 1, 5)]


class TestColumnCount:
    """Tests for column_count."""

    @pytest.mark.parametrize("length, expected", [(0, 0), (1, 1), (7, 1), (8, 2), (14, 2)])
    def test_rounds_up(self, length, expected):
        assert column_count([EMPTY] * length) == expected
