"""
contribution-heatmap: render a GitHub-style contribution heatmap

Entry point for the command line.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from contribution_heatmap.canvas import SvgCanvas
from contribution_heatmap.cli import display_heatmap, display_summary
from contribution_heatmap.config import default_config
from contribution_heatmap.entry_parser import EntryParseError, load_entries
from contribution_heatmap.grid_geometry import EdgeInsets
from contribution_heatmap.labels import WeekdayLabel
from contribution_heatmap.palettes import HeatmapColor
from contribution_heatmap.render_heatmap import HeatmapRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contribution-heatmap",
        description="Render a contribution heatmap from a JSON list of {date, count} records.",
    )
    parser.add_argument("entries", type=Path, help="JSON file with entries")
    parser.add_argument("-o", "--output", type=Path, help="Write SVG here (default: stdout)")
    parser.add_argument("--text", action="store_true", help="Print a terminal preview instead of SVG")
    parser.add_argument("--min-date", type=date.fromisoformat, help="First day to show (YYYY-MM-DD)")
    parser.add_argument("--max-date", type=date.fromisoformat, help="Last day to show (YYYY-MM-DD)")
    parser.add_argument("--start-weekday", type=int, help="First day of the week, 1=Monday .. 7=Sunday")
    parser.add_argument("--split-months", action="store_true", help="Insert a blank column between months")
    parser.add_argument("--color", choices=[c.value for c in HeatmapColor], help="Color scheme")
    parser.add_argument("--percentiles", action="store_true", help="Scale colors by data percentiles")
    parser.add_argument("--locale", help="Label language, e.g. en, de, fr, es")
    parser.add_argument("--cell-size", type=float, help="Cell size in pixels")
    parser.add_argument("--cell-spacing", type=float, default=3.0, help="Gap between cells in pixels")
    parser.add_argument("--cell-radius", type=float, default=2.0, help="Cell corner radius in pixels")
    parser.add_argument("--padding", type=float, default=16.0, help="Outer padding in pixels")
    parser.add_argument(
        "--weekday-labels",
        choices=[mode.value for mode in WeekdayLabel],
        default=WeekdayLabel.FULL.value,
        help="Which weekday labels to show",
    )
    parser.add_argument("--no-month-labels", action="store_true", help="Hide month labels")
    parser.add_argument("--cell-dates", action="store_true", help="Draw the day number in each cell")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _config_overrides(args: argparse.Namespace) -> dict:
    overrides = {
        "min_date": args.min_date,
        "max_date": args.max_date,
        "split_month_view": args.split_months,
        "use_percentiles": args.percentiles,
        "cell_spacing": args.cell_spacing,
        "cell_radius": args.cell_radius,
        "padding": EdgeInsets.all(args.padding),
        "weekday_label": WeekdayLabel(args.weekday_labels),
        "show_month_labels": not args.no_month_labels,
        "show_cell_date": args.cell_dates,
    }
    optional = {
        "start_weekday": args.start_weekday,
        "heatmap_color": args.color,
        "locale": args.locale,
        "cell_size": args.cell_size,
    }
    overrides.update({key: value for key, value in optional.items() if value is not None})
    return overrides


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Validate configuration
    try:
        config = default_config(**_config_overrides(args))
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}", file=sys.stderr)
        return 1

    try:
        entries = load_entries(args.entries)
    except (EntryParseError, OSError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    renderer = HeatmapRenderer(entries, config)

    if args.text:
        display_heatmap(renderer)
        display_summary(renderer)
        return 0

    canvas = SvgCanvas(renderer.layout())
    renderer.paint(canvas)
    svg = canvas.to_svg()

    if args.output:
        args.output.write_text(svg + "\n", encoding="utf-8")
        print(f"Wrote {args.output} ({len(entries)} entries, {renderer.columns} columns)")
    else:
        print(svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
