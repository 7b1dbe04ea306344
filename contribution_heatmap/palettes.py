"""
Color schemes for the heatmap.

Each scheme is 11 colors from 0% (no activity) to 100% intensity.
Adding a scheme means adding an enum member and a row in PALETTES.
"""

from enum import Enum

LEVEL_COUNT = 11
MAX_LEVEL = LEVEL_COUNT - 1


class HeatmapColor(str, Enum):
    """Available color schemes."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    ORANGE = "orange"
    TEAL = "teal"
    PINK = "pink"
    INDIGO = "indigo"
    AMBER = "amber"
    CYAN = "cyan"


DEFAULT_COLOR = HeatmapColor.GREEN

PALETTES: dict[HeatmapColor, tuple[str, ...]] = {
    HeatmapColor.BLUE: (
        "#E3F2FD", "#BBDEFB", "#90CAF9", "#64B5F6", "#42A5F5", "#2196F3",
        "#1E88E5", "#1976D2", "#1565C0", "#0D47A1", "#0A3A8A",
    ),
    HeatmapColor.GREEN: (
        "#E8F5E8", "#C8E6C9", "#A5D6A7", "#81C784", "#66BB6A", "#4CAF50",
        "#43A047", "#388E3C", "#2E7D32", "#1B5E20", "#0D4F14",
    ),
    HeatmapColor.PURPLE: (
        "#F3E5F5", "#E1BEE7", "#CE93D8", "#BA68C8", "#AB47BC", "#9C27B0",
        "#8E24AA", "#7B1FA2", "#6A1B9A", "#4A148C", "#3A1070",
    ),
    HeatmapColor.RED: (
        "#FFEBEE", "#FFCDD2", "#EF9A9A", "#E57373", "#EF5350", "#F44336",
        "#E53935", "#D32F2F", "#C62828", "#B71C1C", "#8B1A1A",
    ),
    HeatmapColor.ORANGE: (
        "#FFE4BC", "#FFCC80", "#FFB74D", "#FFA726", "#FF9800", "#FB8C00",
        "#F57C00", "#EF6C00", "#E65100", "#BF360C", "#8D2600",
    ),
    HeatmapColor.TEAL: (
        "#E0F2F1", "#B2DFDB", "#80CBC4", "#4DB6AC", "#26A69A", "#009688",
        "#00897B", "#00796B", "#00695C", "#004D40", "#003530",
    ),
    HeatmapColor.PINK: (
        "#FCE4EC", "#F8BBD9", "#F48FB1", "#F06292", "#EC407A", "#E91E63",
        "#D81B60", "#C2185B", "#AD1457", "#880E4F", "#6A0B3D",
    ),
    HeatmapColor.INDIGO: (
        "#E8EAF6", "#C5CAE9", "#9FA8DA", "#7986CB", "#5C6BC0", "#3F51B5",
        "#3949AB", "#303F9F", "#283593", "#1A237E", "#141B65",
    ),
    HeatmapColor.AMBER: (
        "#FFF8E1", "#FFECB3", "#FFE082", "#FFD54F", "#FFCA28", "#FFC107",
        "#FFB300", "#FFA000", "#FF8F00", "#FF6F00", "#E65100",
    ),
    HeatmapColor.CYAN: (
        "#E0F7FA", "#B2EBF2", "#80DEEA", "#4DD0E1", "#26C6DA", "#00BCD4",
        "#00ACC1", "#0097A7", "#00838F", "#006064", "#004D52",
    ),
}


def get_palette(heatmap_color: HeatmapColor | str) -> tuple[str, ...]:
    """
    Return the 11-color palette for a scheme.

    Args:
        heatmap_color: A HeatmapColor or its name (e.g. "blue")

    Raises:
        ValueError: If the name is not a known scheme
    """
    return PALETTES[HeatmapColor(heatmap_color)]


def palette_name(heatmap_color: HeatmapColor | str) -> str:
    """Human-readable scheme name, e.g. "Blue"."""
    return HeatmapColor(heatmap_color).value.capitalize()
