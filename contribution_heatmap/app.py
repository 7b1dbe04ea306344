"""
FastAPI web application for contribution-heatmap.

Provides REST API endpoints that lay out, render and hit-test heatmaps for
posted entries.
"""

import datetime

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from contribution_heatmap.canvas import SvgCanvas
from contribution_heatmap.config import HeatmapConfig, default_config, validate_config
from contribution_heatmap.grid_geometry import EdgeInsets, Point
from contribution_heatmap.labels import WeekdayLabel
from contribution_heatmap.models import ContributionEntry
from contribution_heatmap.palettes import HeatmapColor, palette_name
from contribution_heatmap.render_heatmap import HeatmapRenderer

app = FastAPI(
    title="contribution-heatmap",
    description="Calendar-style contribution heatmap layout and rendering",
    version="0.1.0",
)


class EntryIn(BaseModel):
    """A single (date, count) entry."""

    date: datetime.date
    count: int = Field(..., ge=0, description="Contributions on this day")


class HeatmapOptions(BaseModel):
    """Layout options. Unset locale, start weekday, color and cell size use environment defaults."""

    min_date: datetime.date | None = None
    max_date: datetime.date | None = None
    cell_size: float | None = Field(None, gt=0)
    cell_spacing: float = Field(3.0, ge=0)
    cell_radius: float = Field(2.0, ge=0)
    padding: float = Field(16.0, ge=0, description="Padding on all four sides")
    show_month_labels: bool = True
    show_weekday_labels: bool = True
    weekday_label: WeekdayLabel = WeekdayLabel.FULL
    show_cell_date: bool = False
    start_weekday: int | None = Field(None, ge=1, le=7, description="1=Monday .. 7=Sunday")
    split_month_view: bool = False
    heatmap_color: HeatmapColor | None = None
    use_percentiles: bool = False
    text_scale: float = Field(1.0, gt=0)
    locale: str | None = Field(None, max_length=35)


class HeatmapRequest(BaseModel):
    """Request model for heatmap layout and rendering."""

    entries: list[EntryIn] = Field(default_factory=list)
    options: HeatmapOptions = Field(default_factory=HeatmapOptions)
    today: datetime.date | None = Field(
        None, description="Anchor for the 365-day fallback when there is no data"
    )


class TapRequest(HeatmapRequest):
    """Request model for resolving a tap to a date."""

    x: float
    y: float


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def _build_config(options: HeatmapOptions) -> HeatmapConfig:
    """
    Merge request options over environment defaults.

    Raises:
        HTTPException: 500 on bad environment configuration, 422 on
            inconsistent options
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    overrides = options.model_dump(exclude_none=True, exclude={"padding", "min_date", "max_date"})
    overrides["padding"] = EdgeInsets.all(options.padding)
    overrides["min_date"] = options.min_date
    overrides["max_date"] = options.max_date

    try:
        return default_config(**overrides)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _build_renderer(request: HeatmapRequest) -> HeatmapRenderer:
    config = _build_config(request.options)
    entries = [ContributionEntry(entry.date, entry.count) for entry in request.entries]
    return HeatmapRenderer(entries, config, today=request.today)


@app.post("/api/heatmap")
def get_heatmap_layout(request: HeatmapRequest):
    """
    Lay out a heatmap.

    Returns:
        JSON with the total size, visible range, every non-empty cell and
        the month and weekday labels
    """
    renderer = _build_renderer(request)
    size = renderer.layout()
    date_range = renderer.date_range
    color = renderer.config.heatmap_color

    return {
        "size": {"width": size.width, "height": size.height},
        "columns": renderer.columns,
        "range": {
            "actual_first": date_range.actual_first.isoformat(),
            "actual_last": date_range.actual_last.isoformat(),
            "aligned_first": date_range.aligned_first.isoformat(),
            "aligned_last": date_range.aligned_last.isoformat(),
        },
        "palette": {
            "name": palette_name(color),
            "colors": list(renderer.color_scale.palette),
        },
        "cells": [
            {
                "date": cell.date.isoformat(),
                "count": cell.value,
                "level": cell.level,
                "color": cell.color,
                "column": cell.column,
                "row": cell.row,
                "rect": {
                    "x": cell.rect.left,
                    "y": cell.rect.top,
                    "width": cell.rect.width,
                    "height": cell.rect.height,
                },
            }
            for cell in renderer.cells()
        ],
        "month_labels": [
            {"column": label.column, "month": label.month, "text": label.text}
            for label in renderer.month_labels()
        ],
        "weekday_labels": [
            {"row": label.row, "text": label.text}
            for label in renderer.weekday_labels()
        ],
    }


@app.post("/api/heatmap/svg")
def get_heatmap_svg(request: HeatmapRequest):
    """
    Render a heatmap as an SVG document.

    Returns:
        image/svg+xml response
    """
    renderer = _build_renderer(request)
    canvas = SvgCanvas(renderer.layout())
    renderer.paint(canvas)
    return Response(content=canvas.to_svg(), media_type="image/svg+xml")


@app.post("/api/heatmap/tap")
def resolve_tap(request: TapRequest):
    """
    Resolve a tap position to the date and count beneath it.

    Taps outside the grid, in the gutters between cells or on empty slots
    return hit=false.

    Returns:
        JSON with hit, date and count
    """
    renderer = _build_renderer(request)
    hit = renderer.handle_tap(Point(request.x, request.y))

    if hit is None:
        return {"hit": False, "date": None, "count": None}

    return {"hit": True, "date": hit.date.isoformat(), "count": hit.value}
