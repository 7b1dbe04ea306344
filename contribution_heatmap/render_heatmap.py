"""
Render state for a contribution heatmap.

HeatmapRenderer owns every derived stage (value index, date range, cell
sequence, color scale, grid geometry) and reruns only the stages a change
actually affects. Which stages a change touches is spelled out in
RECOMPUTE_TABLE rather than in per-setter dirty flags.

Data stages run synchronously inside update(). Layout and paint are
deferred: update() only marks them pending, and layout()/paint() clear them.
"""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable

from contribution_heatmap.canvas import Canvas
from contribution_heatmap.color_scale import ColorScale, create_color_scale
from contribution_heatmap.config import HeatmapConfig
from contribution_heatmap.date_range import resolve_range
from contribution_heatmap.date_utils import DAYS_PER_WEEK, day_key
from contribution_heatmap.grid_geometry import (
    BoxConstraints,
    GridGeometry,
    Point,
    Rect,
    Size,
)
from contribution_heatmap.labels import (
    MonthLabel,
    WeekdayLabel,
    WeekdayLabelRow,
    plan_month_labels,
    plan_weekday_labels,
)
from contribution_heatmap.models import ContributionEntry, DateRange, DateSlot, Slot
from contribution_heatmap.sequence_builder import build_sequence, column_count
from contribution_heatmap.text_metrics import ApproximateTextMeasurer, TextMeasurer

logger = logging.getLogger(__name__)

WEEKDAY_LABEL_GAP = 8  # reserved between widest weekday label and grid
WEEKDAY_LABEL_INSET = 4  # weekday label right edge to grid
MONTH_LABEL_GAP = 6  # below month labels
MONTH_SAMPLE_TEXT = "MMM"

TapCallback = Callable[[date, int], None]
ColorFunction = Callable[[int], str]


class Stage(str, Enum):
    """Derived stages, in the order they run."""

    INDEX = "index"
    RANGE = "range"
    SEQUENCE = "sequence"
    COLOR = "color"
    LAYOUT = "layout"
    PAINT = "paint"


STAGE_ORDER = tuple(Stage)

_DATA = frozenset({Stage.INDEX, Stage.RANGE, Stage.SEQUENCE, Stage.COLOR, Stage.LAYOUT})
_RANGE = frozenset({Stage.RANGE, Stage.SEQUENCE, Stage.LAYOUT})
_SEQUENCE = frozenset({Stage.SEQUENCE, Stage.LAYOUT})
_COLOR = frozenset({Stage.COLOR, Stage.PAINT})
_LAYOUT = frozenset({Stage.LAYOUT})
_PAINT = frozenset({Stage.PAINT})

# Input -> stages that must rerun when it changes
RECOMPUTE_TABLE: dict[str, frozenset[Stage]] = {
    "entries": _DATA,
    "min_date": _RANGE,
    "max_date": _RANGE,
    "start_weekday": _RANGE,
    "split_month_view": _SEQUENCE,
    "heatmap_color": _COLOR,
    "use_percentiles": _COLOR,
    "cell_size": _LAYOUT,
    "cell_spacing": _LAYOUT,
    "padding": _LAYOUT,
    "show_month_labels": _LAYOUT,
    "show_weekday_labels": _LAYOUT,
    "weekday_label": _LAYOUT,
    "month_text_style": _LAYOUT,
    "weekday_text_style": _LAYOUT,
    "text_scale": _LAYOUT,
    "locale": _LAYOUT,
    "cell_radius": _PAINT,
    "show_cell_date": _PAINT,
    "cell_date_text_style": _PAINT,
}


def plan_recompute(
    old: HeatmapConfig,
    new: HeatmapConfig,
    entries_changed: bool = False,
) -> frozenset[Stage]:
    """
    Work out which stages must rerun for a configuration change.

    Args:
        old: Configuration currently applied
        new: Configuration about to be applied
        entries_changed: Whether the entry list changed as well

    Returns:
        Set of stages to rerun; a layout always implies a repaint
    """
    stages = set(RECOMPUTE_TABLE["entries"]) if entries_changed else set()
    for config_field in dataclasses.fields(HeatmapConfig):
        name = config_field.name
        if getattr(old, name) != getattr(new, name):
            stages |= RECOMPUTE_TABLE[name]
    if Stage.LAYOUT in stages:
        stages.add(Stage.PAINT)
    return frozenset(stages)


@dataclass(frozen=True)
class CellHit:
    """A resolved tap on a real date."""

    index: int
    date: date
    value: int


@dataclass(frozen=True)
class CellInfo:
    """Everything needed to draw or describe one non-empty cell."""

    index: int
    column: int
    row: int
    date: date
    value: int
    level: int
    color: str
    rect: Rect


class HeatmapRenderer:
    """Stateful heatmap renderer with stage-level invalidation."""

    def __init__(
        self,
        entries: list[ContributionEntry],
        config: HeatmapConfig | None = None,
        on_cell_tap: TapCallback | None = None,
        measurer: TextMeasurer | None = None,
        today: date | None = None,
        color_function: ColorFunction | None = None,
    ):
        """
        Initialize the renderer and run every data stage.

        Args:
            entries: Contribution entries, in any order
            config: Layout and paint inputs (defaults to HeatmapConfig())
            on_cell_tap: Called with (date, value) for taps on real dates
            measurer: Text measurement primitive
            today: Override for today's date, used by the empty-range fallback
            color_function: Maps a count to a cell color, replacing the palette
                color. Levels still come from the built color scale.
        """
        self._entries = tuple(entries)
        self._config = config if config is not None else HeatmapConfig()
        self.on_cell_tap = on_cell_tap
        self._measurer = measurer if measurer is not None else ApproximateTextMeasurer()
        self._today = today
        self._color_function = color_function
        self._constraints = BoxConstraints.loose()

        self._value_by_date: dict[date, int] = {}
        self._date_range: DateRange | None = None
        self._sequence: tuple[Slot, ...] = ()
        self._color_scale: ColorScale | None = None
        self._geometry: GridGeometry | None = None
        self._size: Size | None = None
        self._pending: set[Stage] = set()

        self._run(frozenset(STAGE_ORDER))

    # Inputs

    @property
    def entries(self) -> tuple[ContributionEntry, ...]:
        return self._entries

    @property
    def config(self) -> HeatmapConfig:
        return self._config

    def update(
        self,
        entries: list[ContributionEntry] | None = None,
        **changes,
    ) -> frozenset[Stage]:
        """
        Apply new entries and/or configuration fields.

        Args:
            entries: Replacement entry list, or None to keep the current one
            **changes: HeatmapConfig fields to change

        Returns:
            The stages that were rerun or marked pending
        """
        new_config = dataclasses.replace(self._config, **changes) if changes else self._config
        new_entries = tuple(entries) if entries is not None else self._entries
        entries_changed = new_entries != self._entries

        plan = plan_recompute(self._config, new_config, entries_changed)
        self._entries = new_entries
        self._config = new_config

        if plan:
            logger.debug("Recompute plan: %s", sorted(stage.value for stage in plan))
            self._run(plan)
        return plan

    def _run(self, stages: frozenset[Stage]) -> None:
        for stage in STAGE_ORDER:
            if stage not in stages:
                continue
            if stage == Stage.INDEX:
                self._rebuild_index()
            elif stage == Stage.RANGE:
                self._recompute_range()
            elif stage == Stage.SEQUENCE:
                self._rebuild_sequence()
            elif stage == Stage.COLOR:
                self._rebuild_color_scale()
            elif stage == Stage.LAYOUT:
                self._geometry = None
                self._pending.add(Stage.LAYOUT)
            elif stage == Stage.PAINT:
                self._pending.add(Stage.PAINT)

    # Data stages

    def _rebuild_index(self) -> None:
        # Later entries for the same day overwrite earlier ones
        self._value_by_date = {day_key(entry.date): entry.count for entry in self._entries}

    def _recompute_range(self) -> None:
        config = self._config
        self._date_range = resolve_range(
            list(self._entries),
            config.start_weekday,
            min_date=config.min_date,
            max_date=config.max_date,
            today=self._today,
        )

    def _rebuild_sequence(self) -> None:
        self._sequence = build_sequence(
            self._date_range,
            self._config.start_weekday,
            self._config.split_month_view,
        )

    def _rebuild_color_scale(self) -> None:
        self._color_scale = create_color_scale(
            list(self._entries),
            self._config.heatmap_color,
            use_percentiles=self._config.use_percentiles,
        )

    @property
    def date_range(self) -> DateRange:
        return self._date_range

    @property
    def sequence(self) -> tuple[Slot, ...]:
        return self._sequence

    @property
    def columns(self) -> int:
        return column_count(self._sequence)

    @property
    def color_scale(self) -> ColorScale:
        return self._color_scale

    @property
    def color_function(self) -> ColorFunction | None:
        return self._color_function

    @color_function.setter
    def color_function(self, value: ColorFunction | None) -> None:
        if value is not self._color_function:
            self._color_function = value
            self._pending.add(Stage.PAINT)

    def color_for(self, value: int) -> str:
        """Cell color for a count, from the color function when one is set."""
        if self._color_function is not None:
            return self._color_function(value)
        return self._color_scale.color(value)

    def value_for(self, day: date) -> int:
        """Stored count for a day, 0 when absent."""
        return self._value_by_date.get(day_key(day), 0)

    # Layout

    @property
    def needs_layout(self) -> bool:
        return Stage.LAYOUT in self._pending

    @property
    def needs_paint(self) -> bool:
        return Stage.PAINT in self._pending

    def layout(self, constraints: BoxConstraints | None = None) -> Size:
        """
        Compute grid geometry and the final size within constraints.

        Returns:
            The constrained total size
        """
        if constraints is not None and constraints != self._constraints:
            self._constraints = constraints
            self._pending.update((Stage.LAYOUT, Stage.PAINT))

        if self._geometry is None or Stage.LAYOUT in self._pending:
            config = self._config
            self._geometry = GridGeometry(
                cell_size=config.cell_size,
                cell_spacing=config.cell_spacing,
                padding=config.padding,
                left_label_width=self._measure_weekday_label_width(),
                top_label_height=self._measure_month_label_height(),
                columns=self.columns,
            )
            self._size = self._constraints.constrain(self._geometry.desired_size)
            self._pending.discard(Stage.LAYOUT)

        return self._size

    @property
    def geometry(self) -> GridGeometry:
        self.layout()
        return self._geometry

    @property
    def size(self) -> Size:
        return self.layout()

    def weekday_labels(self) -> list[WeekdayLabelRow]:
        config = self._config
        return plan_weekday_labels(
            config.effective_weekday_label, config.locale, config.start_weekday
        )

    def month_labels(self) -> list[MonthLabel]:
        if not self._config.show_month_labels:
            return []
        return plan_month_labels(self._sequence, self._config.locale)

    def _measure_weekday_label_width(self) -> float:
        if self._config.effective_weekday_label == WeekdayLabel.NONE:
            return 0.0
        widest = max(
            (
                self._measure(label.text, self._config.weekday_text_style).width
                for label in self.weekday_labels()
            ),
            default=0.0,
        )
        return widest + WEEKDAY_LABEL_GAP

    def _measure_month_label_height(self) -> float:
        if not self._config.show_month_labels:
            return 0.0
        return self._measure(MONTH_SAMPLE_TEXT, self._config.month_text_style).height + MONTH_LABEL_GAP

    def _measure(self, text, style) -> Size:
        return self._measurer.measure(text, style, self._config.text_scale)

    # Paint

    def cells(self, offset: Point = Point(0, 0)) -> list[CellInfo]:
        """Describe every non-empty cell in sequence order."""
        geometry = self.geometry
        cells = []
        for index, slot in enumerate(self._sequence):
            if not isinstance(slot, DateSlot):
                continue
            value = self._value_by_date.get(slot.date, 0)
            rect = geometry.rect_for_index(index)
            column, row = divmod(index, DAYS_PER_WEEK)
            cells.append(
                CellInfo(
                    index=index,
                    column=column,
                    row=row,
                    date=slot.date,
                    value=value,
                    level=self._color_scale.level(value),
                    color=self.color_for(value),
                    rect=Rect(rect.left + offset.x, rect.top + offset.y, rect.width, rect.height),
                )
            )
        return cells

    def paint(self, canvas: Canvas, offset: Point = Point(0, 0)) -> None:
        """
        Issue paint commands: weekday labels, then month labels, then cells.
        """
        geometry = self.geometry

        self._paint_weekday_labels(canvas, offset, geometry)
        self._paint_month_labels(canvas, offset, geometry)
        self._paint_cells(canvas, offset)

        self._pending.discard(Stage.PAINT)

    def _paint_weekday_labels(self, canvas: Canvas, offset: Point, geometry: GridGeometry) -> None:
        config = self._config
        style = config.weekday_text_style
        origin = geometry.grid_origin
        for label in self.weekday_labels():
            extent = self._measure(label.text, style)
            x = (
                offset.x
                + config.padding.left
                + geometry.left_label_width
                - extent.width
                - WEEKDAY_LABEL_INSET
            )
            y = offset.y + origin.y + label.row * geometry.stride + (config.cell_size - extent.height) / 2
            canvas.draw_text(label.text, Point(x, y), style, config.text_scale)

    def _paint_month_labels(self, canvas: Canvas, offset: Point, geometry: GridGeometry) -> None:
        config = self._config
        origin = geometry.grid_origin
        for label in self.month_labels():
            position = Point(
                offset.x + origin.x + label.column * geometry.stride,
                offset.y + config.padding.top,
            )
            canvas.draw_text(label.text, position, config.month_text_style, config.text_scale)

    def _paint_cells(self, canvas: Canvas, offset: Point) -> None:
        config = self._config
        for cell in self.cells(offset):
            canvas.draw_rounded_rect(cell.rect, config.cell_radius, cell.color)
            if config.show_cell_date:
                self._paint_cell_date(canvas, cell)

    def _paint_cell_date(self, canvas: Canvas, cell: CellInfo) -> None:
        config = self._config
        text = str(cell.date.day)
        extent = self._measure(text, config.cell_date_text_style)
        if extent.width > cell.rect.width or extent.height > cell.rect.height:
            return
        position = Point(
            cell.rect.left + (cell.rect.width - extent.width) / 2,
            cell.rect.top + (cell.rect.height - extent.height) / 2,
        )
        canvas.draw_text(text, position, config.cell_date_text_style, config.text_scale)

    # Interaction

    def resolve_tap(self, point: Point) -> CellHit | None:
        """Resolve a local point to the date and value beneath it."""
        index = self.geometry.hit_test(point, self._sequence)
        if index is None:
            return None
        day = self._sequence[index].date
        return CellHit(index=index, date=day, value=self._value_by_date.get(day, 0))

    def handle_tap(self, point: Point) -> CellHit | None:
        """
        Handle a primary pointer release at a local point.

        The tap callback runs once for a hit on a real date and never for a
        miss or an empty slot.
        """
        hit = self.resolve_tap(point)
        if hit is None:
            logger.debug("Tap at (%s, %s) hit no date", point.x, point.y)
            return None
        if self.on_cell_tap is not None:
            self.on_cell_tap(hit.date, hit.value)
        return hit
