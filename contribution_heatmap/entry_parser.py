"""
Parse contribution entries from JSON-style records.
"""

import json
from datetime import date, datetime
from pathlib import Path

from contribution_heatmap.date_utils import day_key
from contribution_heatmap.models import ContributionEntry


class EntryParseError(ValueError):
    """Raised when a record cannot be turned into a ContributionEntry."""

    pass


def _parse_day(raw) -> date | None:
    if isinstance(raw, (date, datetime)):
        return day_key(raw)
    if not isinstance(raw, str) or not raw.strip() or raw == "unknown":
        return None
    # Timestamps keep only their written date; the offset is not applied
    return date.fromisoformat(raw.strip()[:10])


def parse_entries(records: list[dict]) -> list[ContributionEntry]:
    """
    Parse contribution entries from a list of records.

    Each record needs a "date" (ISO date or timestamp) and a "count".
    Activity-tracker exports that use "commit_count" are accepted too.
    Records without a usable date are skipped.

    Args:
        records: List of dicts

    Returns:
        List of ContributionEntry in input order

    Raises:
        EntryParseError: If a count is missing, not an integer or negative,
            or a date string is malformed
    """
    entries = []

    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise EntryParseError(f"Record {position} is not an object: {record!r}")

        try:
            day = _parse_day(record.get("date"))
        except ValueError as e:
            raise EntryParseError(f"Record {position} has an invalid date: {e}") from e
        if day is None:
            continue

        count = record.get("count", record.get("commit_count"))
        if isinstance(count, bool) or not isinstance(count, int):
            raise EntryParseError(
                f"Record {position} ({day.isoformat()}) needs an integer count, got {count!r}"
            )

        try:
            entries.append(ContributionEntry(day, count))
        except ValueError as e:
            raise EntryParseError(f"Record {position} ({day.isoformat()}): {e}") from e

    return entries


def load_entries(path: str | Path) -> list[ContributionEntry]:
    """
    Load contribution entries from a JSON file holding a list of records.

    Raises:
        EntryParseError: If the file is not a JSON list or a record is invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise EntryParseError(f"{path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise EntryParseError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise EntryParseError(f"{path} must contain a JSON list of entries")

    return parse_entries(data)
