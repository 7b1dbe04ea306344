"""
Terminal display functions for contribution-heatmap.
"""

from contribution_heatmap.date_utils import DAYS_PER_WEEK
from contribution_heatmap.labels import rotated_weekday_names
from contribution_heatmap.models import DateSlot
from contribution_heatmap.render_heatmap import HeatmapRenderer

EMPTY_GLYPH = " "


def level_glyph(level: int) -> str:
    """
    Shade character for an intensity level.

    Args:
        level: Intensity level 0-10

    Returns:
        One of five glyphs, lightest for 0 and solid for 10
    """
    if level <= 0:
        return "·"
    elif level <= 3:
        return "░"
    elif level <= 6:
        return "▒"
    elif level <= 9:
        return "▓"
    else:
        return "█"


def display_heatmap(renderer: HeatmapRenderer) -> None:
    """
    Print a text rendition of the heatmap grid.

    Weeks run left to right and weekdays top to bottom, the same way the
    graphical grid is laid out. Empty slots print as blanks.

    Args:
        renderer: A HeatmapRenderer with entries and configuration applied
    """
    config = renderer.config
    sequence = renderer.sequence
    columns = renderer.columns
    scale = renderer.color_scale

    day_names = rotated_weekday_names(config.locale, config.start_weekday)
    name_width = max(len(name) for name in day_names)

    print("Contribution Activity:")

    if config.show_month_labels:
        header = ""
        for label in renderer.month_labels():
            # Each column is two characters wide; keep a gap between labels
            gap = max(label.column * 2 - len(header), 1 if header else 0)
            header += " " * gap + label.text
        print(" " * (name_width + 1) + header)

    for row in range(DAYS_PER_WEEK):
        line = f"{day_names[row]:<{name_width}} "
        for column in range(columns):
            index = column * DAYS_PER_WEEK + row
            slot = sequence[index] if index < len(sequence) else None
            if isinstance(slot, DateSlot):
                glyph = level_glyph(scale.level(renderer.value_for(slot.date)))
            else:
                glyph = EMPTY_GLYPH
            line += glyph + " "
        print(line.rstrip())

    print()


def display_summary(renderer: HeatmapRenderer) -> None:
    """
    Print totals for the visible range.

    Args:
        renderer: A HeatmapRenderer with entries and configuration applied
    """
    date_range = renderer.date_range
    # Week-alignment padding days are shown but not counted
    days = [
        slot.date
        for slot in renderer.sequence
        if isinstance(slot, DateSlot)
        and date_range.actual_first <= slot.date <= date_range.actual_last
    ]
    counts = {day: renderer.value_for(day) for day in days}
    total = sum(counts.values())
    active = sum(1 for count in counts.values() if count > 0)

    total_label = "contribution" if total == 1 else "contributions"
    active_label = "day" if active == 1 else "days"

    print(f"📊 {date_range.actual_first.isoformat()} to {date_range.actual_last.isoformat()}")
    print(f"   Total:  {total} {total_label}")
    print(f"   Active: {active} {active_label}")

    if total > 0:
        busiest = max(days, key=lambda day: (counts[day], -day.toordinal()))
        print(f"   Busiest: {busiest.isoformat()} ({counts[busiest]})")
    print()
