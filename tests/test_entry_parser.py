"""
Tests for contribution entry parsing.
"""

import json
from datetime import date

import pytest

from contribution_heatmap.entry_parser import EntryParseError, load_entries, parse_entries
from contribution_heatmap.models import ContributionEntry


def test_parse_basic_records():
    """Test parsing date/count records."""
    records = [
        {"date": "2026-01-19", "count": 2},
        {"date": "2026-01-20", "count": 0},
    ]

    result = parse_entries(records)

    assert result == [
        ContributionEntry(date(2026, 1, 19), 2),
        ContributionEntry(date(2026, 1, 20), 0),
    ]


def test_parse_timestamp_keeps_written_date():
    """Test that timestamps are reduced to their calendar day."""
    result = parse_entries([{"date": "2026-01-19T23:30:00Z", "count": 1}])
    assert result[0].date == date(2026, 1, 19)


def test_parse_commit_count_records():
    """Test records exported by activity trackers."""
    records = [{"date": "2026-01-19", "repo": "user/repo", "commit_count": 3}]

    result = parse_entries(records)

    assert result == [ContributionEntry(date(2026, 1, 19), 3)]


def test_count_takes_precedence_over_commit_count():
    result = parse_entries([{"date": "2026-01-19", "count": 5, "commit_count": 3}])
    assert result[0].count == 5


def test_accepts_date_objects():
    result = parse_entries([{"date": date(2025, 12, 31), "count": 4}])
    assert result[0].date == date(2025, 12, 31)


def test_skip_records_without_usable_date():
    """Test that missing, empty and unknown dates are skipped."""
    records = [
        {"count": 1},
        {"date": "", "count": 1},
        {"date": "unknown", "count": 1},
        {"date": "2026-01-19", "count": 1},
    ]

    result = parse_entries(records)

    assert len(result) == 1
    assert result[0].date == date(2026, 1, 19)


def test_parse_empty_list():
    assert parse_entries([]) == []


def test_duplicate_days_are_kept_in_order():
    """Test that the parser leaves duplicate resolution to the renderer."""
    records = [
        {"date": "2026-01-19", "count": 1},
        {"date": "2026-01-19", "count": 4},
    ]

    result = parse_entries(records)

    assert [entry.count for entry in result] == [1, 4]


@pytest.mark.parametrize("count", [None, "3", 1.5, True])
def test_reject_non_integer_count(count):
    with pytest.raises(EntryParseError, match="integer count"):
        parse_entries([{"date": "2026-01-19", "count": count}])


def test_reject_negative_count():
    with pytest.raises(EntryParseError, match="non-negative"):
        parse_entries([{"date": "2026-01-19", "count": -1}])


def test_reject_malformed_date():
    with pytest.raises(EntryParseError, match="invalid date"):
        parse_entries([{"date": "2026-13-45", "count": 1}])


def test_reject_non_object_record():
    with pytest.raises(EntryParseError, match="not an object"):
        parse_entries([["2026-01-19", 1]])


def test_parse_error_is_value_error():
    assert issubclass(EntryParseError, ValueError)


def test_load_entries_from_file(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps([{"date": "2024-01-01", "count": 1}]))

    assert load_entries(path) == [ContributionEntry(date(2024, 1, 1), 1)]


def test_load_entries_rejects_non_list(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps({"date": "2024-01-01", "count": 1}))

    with pytest.raises(EntryParseError, match="JSON list"):
        load_entries(path)


def test_load_entries_rejects_invalid_json(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text("[{")

    with pytest.raises(EntryParseError, match="not valid JSON"):
        load_entries(path)


def test_load_entries_rejects_non_utf8(tmp_path):
    path = tmp_path / "entries.json"
    path.write_bytes(b'[{"date": "2024-01-01", "count": 1, "note": "\xff\xfe"}]')

    with pytest.raises(EntryParseError, match="not UTF-8"):
        load_entries(path)
