"""
Text styles and text measurement.

Real glyph metrics belong to whatever draws the output. The approximate
measurer is good enough for SVG output in a sans-serif font.
"""

from dataclasses import dataclass
from typing import Protocol

from contribution_heatmap.grid_geometry import Size

DEFAULT_FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif"


@dataclass(frozen=True)
class TextStyle:
    font_size: float = 12.0
    color: str = "#57606A"
    font_family: str = DEFAULT_FONT_FAMILY


MONTH_TEXT_STYLE = TextStyle(font_size=12.0)
WEEKDAY_TEXT_STYLE = TextStyle(font_size=11.0)
CELL_DATE_TEXT_STYLE = TextStyle(font_size=8.0, color="#24292F")


class TextMeasurer(Protocol):
    def measure(self, text: str, style: TextStyle, text_scale: float = 1.0) -> Size:
        ...


class ApproximateTextMeasurer:
    """Estimate text extents from character count and font size."""

    def __init__(self, width_factor: float = 0.6, line_height: float = 1.0):
        self.width_factor = width_factor
        self.line_height = line_height

    def measure(self, text: str, style: TextStyle, text_scale: float = 1.0) -> Size:
        font_size = style.font_size * text_scale
        return Size(
            width=len(text) * font_size * self.width_factor,
            height=font_size * self.line_height,
        )
