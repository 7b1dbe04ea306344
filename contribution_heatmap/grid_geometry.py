"""
Grid layout for the heatmap.

Maps sequence positions to pixel rectangles (for painting) and pixel points
back to sequence indexes (for tap handling). The two mappings are exact
inverses for any point inside a cell.
"""

import math
from dataclasses import dataclass

from contribution_heatmap.date_utils import DAYS_PER_WEEK
from contribution_heatmap.models import DateSlot, Slot


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class EdgeInsets:
    """Padding on four sides."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    def __post_init__(self):
        for side in ("left", "top", "right", "bottom"):
            if getattr(self, side) < 0:
                raise ValueError(f"padding {side} must be non-negative")


@dataclass(frozen=True)
class BoxConstraints:
    """Size limits handed down by the host layout."""

    min_width: float = 0.0
    max_width: float = math.inf
    min_height: float = 0.0
    max_height: float = math.inf

    @classmethod
    def loose(cls) -> "BoxConstraints":
        return cls()

    def constrain(self, size: Size) -> Size:
        return Size(
            min(max(size.width, self.min_width), self.max_width),
            min(max(size.height, self.min_height), self.max_height),
        )


@dataclass(frozen=True)
class GridGeometry:
    """
    Derived layout scalars for one sequence and one set of layout inputs.

    All points and rects are local to the widget origin.
    """

    cell_size: float
    cell_spacing: float
    padding: EdgeInsets
    left_label_width: float
    top_label_height: float
    columns: int

    @property
    def stride(self) -> float:
        """Distance between the starts of neighbouring cells."""
        return self.cell_size + self.cell_spacing

    @property
    def grid_origin(self) -> Point:
        return Point(
            self.padding.left + self.left_label_width,
            self.padding.top + self.top_label_height,
        )

    @property
    def grid_size(self) -> Size:
        width = self.columns * self.cell_size + max(0, self.columns - 1) * self.cell_spacing
        height = DAYS_PER_WEEK * self.cell_size + (DAYS_PER_WEEK - 1) * self.cell_spacing
        return Size(width, height)

    @property
    def desired_size(self) -> Size:
        grid = self.grid_size
        return Size(
            self.padding.left + self.left_label_width + grid.width + self.padding.right,
            self.padding.top + self.top_label_height + grid.height + self.padding.bottom,
        )

    def cell_origin(self, column: int, row: int) -> Point:
        origin = self.grid_origin
        return Point(origin.x + column * self.stride, origin.y + row * self.stride)

    def cell_rect(self, column: int, row: int) -> Rect:
        origin = self.cell_origin(column, row)
        return Rect(origin.x, origin.y, self.cell_size, self.cell_size)

    def rect_for_index(self, index: int) -> Rect:
        column, row = divmod(index, DAYS_PER_WEEK)
        return self.cell_rect(column, row)

    def cell_at(self, point: Point) -> tuple[int, int] | None:
        """
        Column and row of the cell under a local point.

        Returns None outside the grid or inside a spacing gutter.
        """
        origin = self.grid_origin
        grid_x = point.x - origin.x
        grid_y = point.y - origin.y
        if not (math.isfinite(grid_x) and math.isfinite(grid_y)):
            return None
        if grid_x < 0 or grid_y < 0:
            return None

        column = math.floor(grid_x / self.stride)
        row = math.floor(grid_y / self.stride)
        if column >= self.columns or row >= DAYS_PER_WEEK:
            return None

        within_x = grid_x - column * self.stride
        within_y = grid_y - row * self.stride
        if within_x >= self.cell_size or within_y >= self.cell_size:
            return None

        return column, row

    def hit_test(self, point: Point, sequence: tuple[Slot, ...]) -> int | None:
        """
        Sequence index of the real date under a local point.

        Returns None for misses, gutters, out-of-range positions and empty
        slots.
        """
        cell = self.cell_at(point)
        if cell is None:
            return None

        column, row = cell
        index = column * DAYS_PER_WEEK + row
        if index >= len(sequence) or not isinstance(sequence[index], DateSlot):
            return None
        return index
