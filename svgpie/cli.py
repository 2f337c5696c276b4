"""Command-line interface for svgpie.

Usage:
    svgpie render <file> --output <chart.svg>
    svgpie angles <file>
    svgpie --version
"""

import argparse
import json
import sys
import time
from pathlib import Path

from svgpie import ChartConfig, PieChartError, __version__, allocate_angles, render_pie
from svgpie.io import iter_items


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="svgpie",
        description="svgpie - Self-contained SVG pie charts from tabular data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  svgpie render shares.csv --output chart.svg
  svgpie render shares.csv -o chart.svg --angle-margin 2 --expand-on-hover
  svgpie render shares.json -o chart.html --use-patterns
  svgpie angles shares.csv --start-angle -90
        """,
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"svgpie {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        help="Render a pie chart to SVG or HTML",
        description="Read a table of values and colors and write the chart.",
    )
    render_parser.add_argument("file", type=str, help="Path to the data file (CSV, JSON or Parquet)")
    render_parser.add_argument(
        "--output", "-o", type=str, required=True, help="Output path (.svg or .html)"
    )
    _add_column_arguments(render_parser)
    _add_angle_arguments(render_parser)
    render_parser.add_argument(
        "--view-box-size", type=float, default=100, help="Canvas side before expansion (default: 100)"
    )
    render_parser.add_argument(
        "--expand-size", type=float, default=3, help="Extra radius of an expanded slice (default: 3)"
    )
    render_parser.add_argument(
        "--expanded-index", type=int, default=-1, help="Index of the slice to expand"
    )
    render_parser.add_argument(
        "--expand-on-hover", action="store_true", help="Reserve room for hover expansion"
    )
    render_parser.add_argument(
        "--use-patterns", action="store_true", help="Fill slices with texture patterns"
    )
    render_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress progress output"
    )

    # Angles command
    angles_parser = subparsers.add_parser(
        "angles",
        help="Print the angular span of every slice as JSON",
        description="Allocate slice angles for the positive values in a data file.",
    )
    angles_parser.add_argument("file", type=str, help="Path to the data file (CSV, JSON or Parquet)")
    angles_parser.add_argument(
        "--value-col", type=str, default="value", help="Column holding the values (default: value)"
    )
    _add_angle_arguments(angles_parser)

    return parser


def _add_column_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--value-col", type=str, default="value", help="Column holding the values (default: value)"
    )
    parser.add_argument(
        "--color-col", type=str, default="color", help="Column holding the colors (default: color)"
    )
    parser.add_argument("--title-col", type=str, default=None, help="Column holding slice titles")
    parser.add_argument("--href-col", type=str, default=None, help="Column holding slice links")


def _add_angle_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--start-angle", type=float, default=0, help="Start angle in degrees (default: 0)"
    )
    parser.add_argument(
        "--angle-margin", type=float, default=0, help="Gap after every slice in degrees (default: 0)"
    )


def load_data(file_path: str):
    """Load a table from a CSV, JSON or Parquet file.

    Args:
        file_path: Path to the data file

    Returns:
        pandas DataFrame
    """
    import pandas as pd

    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        return pd.read_csv(file_path)
    elif suffix == ".parquet":
        return pd.read_parquet(file_path)
    elif suffix == ".json":
        return pd.read_json(file_path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use CSV, Parquet, or JSON.")


def cmd_render(args: argparse.Namespace) -> int:
    """Execute the render command."""
    if not args.quiet:
        print(f"Loading data from: {args.file}")

    start_time = time.perf_counter()

    try:
        df = load_data(args.file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        config = ChartConfig(
            start_angle=args.start_angle,
            angle_margin=args.angle_margin,
            view_box_size=args.view_box_size,
            expand_size=args.expand_size,
            expanded_index=args.expanded_index,
            expand_on_hover=args.expand_on_hover,
            use_patterns=args.use_patterns,
        )
        items = list(
            iter_items(
                df,
                value_col=args.value_col,
                color_col=args.color_col,
                title_col=args.title_col,
                href_col=args.href_col,
            )
        )
        chart = render_pie(items, config)
    except PieChartError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if chart is None:
        print("Error: no rows with a positive value; nothing to render", file=sys.stderr)
        return 1

    try:
        chart.save(args.output)
    except (OSError, ValueError) as e:
        print(f"Error saving chart: {e}", file=sys.stderr)
        return 1

    elapsed = time.perf_counter() - start_time

    if not args.quiet:
        print(f"Chart with {len(chart.description.slices)} slice(s) saved to: {args.output}")
        print(f"Completed in {elapsed:.2f} seconds")

    return 0


def cmd_angles(args: argparse.Namespace) -> int:
    """Execute the angles command."""
    import pandas as pd

    try:
        df = load_data(args.file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.value_col not in df.columns:
        print(f"Error: column not found: {args.value_col}", file=sys.stderr)
        return 1

    try:
        column = pd.to_numeric(df[args.value_col].dropna(), errors="raise")
    except (TypeError, ValueError) as e:
        print(f"Error: non-numeric value in column {args.value_col}: {e}", file=sys.stderr)
        return 1

    values = [float(v) for v in column if v > 0]
    if not values:
        print(json.dumps([]))
        return 0

    try:
        spans = allocate_angles(values, args.start_angle, args.angle_margin)
    except PieChartError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    out = [
        {"start_angle": s.start_angle, "end_angle": s.end_angle, "sweep": s.sweep}
        for s in spans
    ]
    print(json.dumps(out, indent=2))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "angles":
        return cmd_angles(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
