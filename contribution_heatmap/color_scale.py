"""
Map contribution counts to one of 11 intensity levels.

Two policies are supported: linear scaling against the dataset maximum, and
percentile buckets over the positive counts. Both are precomputed once per
entry set, so looking up a cell never rescans the data.
"""

import math
from dataclasses import dataclass

from contribution_heatmap.models import ContributionEntry
from contribution_heatmap.palettes import (
    DEFAULT_COLOR,
    MAX_LEVEL,
    HeatmapColor,
    get_palette,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ColorScale:
    """
    A precomputed count -> level -> color mapping.

    With percentile thresholds set, levels come from bucket lookup;
    otherwise from linear scaling against max_value.
    """

    palette: tuple[str, ...]
    max_value: int = 0
    thresholds: tuple[int, ...] | None = None

    def level(self, value: int) -> int:
        """Intensity level 0..10 for a count."""
        if value <= 0 or self.max_value <= 0:
            return 0

        if self.thresholds is not None:
            for index, threshold in enumerate(self.thresholds, start=1):
                if value <= threshold:
                    return index
            return MAX_LEVEL

        intensity = min(max(value / self.max_value, 0.0), 1.0)
        return min(max(_round_half_up(intensity * MAX_LEVEL), 0), MAX_LEVEL)

    def color(self, value: int) -> str:
        """Palette color for a count."""
        return self.palette[self.level(value)]


def create_color_scale(
    entries: list[ContributionEntry],
    heatmap_color: HeatmapColor | str = DEFAULT_COLOR,
    use_percentiles: bool = False,
) -> ColorScale:
    """
    Build a color scale from the current entries.

    Args:
        entries: Contribution entries to analyze
        heatmap_color: Color scheme to draw from
        use_percentiles: Bucket by data percentiles instead of linear scaling

    Returns:
        ColorScale ready for per-cell lookups
    """
    palette = get_palette(heatmap_color)
    positive = sorted(entry.count for entry in entries if entry.count > 0)

    if not positive:
        return ColorScale(palette=palette)

    if not use_percentiles:
        return ColorScale(palette=palette, max_value=positive[-1])

    return ColorScale(
        palette=palette,
        max_value=positive[-1],
        thresholds=percentile_thresholds(positive),
    )


def percentile_thresholds(sorted_values: list[int]) -> tuple[int, ...]:
    """
    Nearest-rank thresholds for levels 1..10.

    threshold[i] is the value at rank round((n - 1) * i / 10).

    Args:
        sorted_values: Positive counts in ascending order (non-empty)
    """
    last_rank = len(sorted_values) - 1
    return tuple(
        sorted_values[_round_half_up(last_rank * i / MAX_LEVEL)]
        for i in range(1, MAX_LEVEL + 1)
    )
