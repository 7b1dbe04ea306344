"""
Configuration for contribution-heatmap.

HeatmapConfig holds every layout and paint input. Environment defaults are
loaded from a .env file in the project root.
"""

import os
from dataclasses import dataclass, field
from datetime import date

from dotenv import load_dotenv

from contribution_heatmap.date_utils import MONDAY, validate_start_weekday
from contribution_heatmap.grid_geometry import EdgeInsets
from contribution_heatmap.labels import WeekdayLabel
from contribution_heatmap.palettes import DEFAULT_COLOR, HeatmapColor
from contribution_heatmap.text_metrics import (
    CELL_DATE_TEXT_STYLE,
    MONTH_TEXT_STYLE,
    WEEKDAY_TEXT_STYLE,
    TextStyle,
)

# Load .env file from project root
load_dotenv()

HEATMAP_LOCALE = os.getenv("HEATMAP_LOCALE", "en")
HEATMAP_START_WEEKDAY = os.getenv("HEATMAP_START_WEEKDAY", str(MONDAY))
HEATMAP_COLOR = os.getenv("HEATMAP_COLOR", DEFAULT_COLOR.value)
HEATMAP_CELL_SIZE = os.getenv("HEATMAP_CELL_SIZE", "12")


@dataclass(frozen=True)
class HeatmapConfig:
    """Layout and paint inputs for one heatmap."""

    min_date: date | None = None
    max_date: date | None = None
    cell_size: float = 12.0
    cell_spacing: float = 3.0
    cell_radius: float = 2.0
    padding: EdgeInsets = field(default_factory=lambda: EdgeInsets.all(16))
    show_month_labels: bool = True
    show_weekday_labels: bool = True
    weekday_label: WeekdayLabel = WeekdayLabel.FULL
    show_cell_date: bool = False
    month_text_style: TextStyle = MONTH_TEXT_STYLE
    weekday_text_style: TextStyle = WEEKDAY_TEXT_STYLE
    cell_date_text_style: TextStyle = CELL_DATE_TEXT_STYLE
    start_weekday: int = MONDAY
    split_month_view: bool = False
    heatmap_color: HeatmapColor = DEFAULT_COLOR
    use_percentiles: bool = False
    text_scale: float = 1.0
    locale: str = "en"

    def __post_init__(self):
        validate_start_weekday(self.start_weekday)

        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.cell_spacing < 0:
            raise ValueError(f"cell_spacing must be non-negative, got {self.cell_spacing}")
        if self.cell_radius < 0:
            raise ValueError(f"cell_radius must be non-negative, got {self.cell_radius}")
        if self.text_scale <= 0:
            raise ValueError(f"text_scale must be positive, got {self.text_scale}")
        if (
            self.min_date is not None
            and self.max_date is not None
            and self.min_date > self.max_date
        ):
            raise ValueError(
                f"min_date {self.min_date} is after max_date {self.max_date}"
            )

        # Accept plain strings for the enum fields
        object.__setattr__(self, "heatmap_color", HeatmapColor(self.heatmap_color))
        object.__setattr__(self, "weekday_label", WeekdayLabel(self.weekday_label))

    @property
    def effective_weekday_label(self) -> WeekdayLabel:
        """The weekday label mode after applying show_weekday_labels."""
        if not self.show_weekday_labels:
            return WeekdayLabel.NONE
        return self.weekday_label


def validate_config():
    """Validate that environment defaults are usable."""
    problems = []

    try:
        validate_start_weekday(int(HEATMAP_START_WEEKDAY))
    except ValueError:
        problems.append(f"HEATMAP_START_WEEKDAY={HEATMAP_START_WEEKDAY!r} (expected 1-7)")

    try:
        HeatmapColor(HEATMAP_COLOR)
    except ValueError:
        names = ", ".join(c.value for c in HeatmapColor)
        problems.append(f"HEATMAP_COLOR={HEATMAP_COLOR!r} (expected one of: {names})")

    try:
        if float(HEATMAP_CELL_SIZE) <= 0:
            raise ValueError
    except ValueError:
        problems.append(f"HEATMAP_CELL_SIZE={HEATMAP_CELL_SIZE!r} (expected a positive number)")

    if problems:
        raise ValueError(
            f"Invalid configuration: {'; '.join(problems)}\n"
            "Please check your .env file or environment variables."
        )


def default_config(**overrides) -> HeatmapConfig:
    """
    Build a HeatmapConfig from environment defaults.

    Args:
        **overrides: HeatmapConfig fields that take precedence over the environment

    Raises:
        ValueError: If the environment or an override is invalid
    """
    validate_config()
    values = {
        "locale": HEATMAP_LOCALE,
        "start_weekday": int(HEATMAP_START_WEEKDAY),
        "heatmap_color": HeatmapColor(HEATMAP_COLOR),
        "cell_size": float(HEATMAP_CELL_SIZE),
    }
    values.update(overrides)
    return HeatmapConfig(**values)
