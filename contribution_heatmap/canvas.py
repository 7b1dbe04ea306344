"""
Paint surfaces for the heatmap.

The renderer issues two kinds of commands: rounded rects and text.
RecordingCanvas keeps them in order; SvgCanvas turns them into an SVG
document.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Protocol

from contribution_heatmap.grid_geometry import Point, Rect, Size
from contribution_heatmap.text_metrics import TextStyle


@dataclass(frozen=True)
class DrawRoundedRect:
    rect: Rect
    radius: float
    color: str


@dataclass(frozen=True)
class DrawText:
    text: str
    position: Point  # top-left of the text box
    style: TextStyle
    text_scale: float = 1.0


PaintCommand = DrawRoundedRect | DrawText


class Canvas(Protocol):
    def draw_rounded_rect(self, rect: Rect, radius: float, color: str) -> None:
        ...

    def draw_text(
        self, text: str, position: Point, style: TextStyle, text_scale: float = 1.0
    ) -> None:
        ...


@dataclass
class RecordingCanvas:
    """Collects paint commands in the order they were issued."""

    commands: list[PaintCommand] = field(default_factory=list)

    def draw_rounded_rect(self, rect: Rect, radius: float, color: str) -> None:
        self.commands.append(DrawRoundedRect(rect, radius, color))

    def draw_text(
        self, text: str, position: Point, style: TextStyle, text_scale: float = 1.0
    ) -> None:
        self.commands.append(DrawText(text, position, style, text_scale))

    @property
    def rects(self) -> list[DrawRoundedRect]:
        return [c for c in self.commands if isinstance(c, DrawRoundedRect)]

    @property
    def texts(self) -> list[DrawText]:
        return [c for c in self.commands if isinstance(c, DrawText)]


def _fmt(value: float) -> str:
    return f"{value:g}"


class SvgCanvas:
    """Writes paint commands as SVG elements."""

    def __init__(self, size: Size, background: str | None = None):
        self.size = size
        self.background = background
        self._parts: list[str] = []

    def draw_rounded_rect(self, rect: Rect, radius: float, color: str) -> None:
        self._parts.append(
            f'  <rect x="{_fmt(rect.left)}" y="{_fmt(rect.top)}" '
            f'width="{_fmt(rect.width)}" height="{_fmt(rect.height)}" '
            f'rx="{_fmt(radius)}" ry="{_fmt(radius)}" fill="{color}"/>'
        )

    def draw_text(
        self, text: str, position: Point, style: TextStyle, text_scale: float = 1.0
    ) -> None:
        self._parts.append(
            f'  <text x="{_fmt(position.x)}" y="{_fmt(position.y)}" '
            f'dominant-baseline="hanging" fill="{style.color}" '
            f'font-size="{_fmt(style.font_size * text_scale)}" '
            f'font-family="{escape(style.font_family)}">{escape(text)}</text>'
        )

    def to_svg(self) -> str:
        width = _fmt(self.size.width)
        height = _fmt(self.size.height)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" '
            f'height="{height}" viewBox="0 0 {width} {height}">'
        ]
        if self.background:
            lines.append(f'  <rect width="100%" height="100%" fill="{self.background}"/>')
        lines.extend(self._parts)
        lines.append("</svg>")
        return "\n".join(lines)
