"""CLI interface for rendering the weather charts."""

import argparse
import logging
import sys
from pathlib import Path

from ...application.services.weather_chart_service import WeatherChartService
from ...infrastructure.rendering.matplotlib_chart_renderer import MatplotlibChartRenderer
from ...infrastructure.repositories.csv_weather_repository import CSVWeatherRepository
from ..page import render_page_html

from config.settings import (
    API_SETTINGS,
    BAR_CHART_SETTINGS,
    CONTAINER_IDS,
    LINE_GRAPH_SETTINGS,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_VIEWPORT_WIDTH,
    MIN_VIEWPORT_WIDTH,
    OUTPUT_DIR,
    REQUIRED_COLUMNS,
    SCATTER_PLOT_SETTINGS,
    VIEWPORT_WIDTH,
    WEATHER_DATA_FILE,
)

# Standalone SVG file per container
SVG_FILES = {
    "bar": "bar_chart.svg",
    "scatter": "scatterplot.svg",
    "line": "line_graph.svg",
}

logger = logging.getLogger(__name__)


def viewport_width(value: str) -> int:
    """argparse type for --viewport-width."""
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    if not MIN_VIEWPORT_WIDTH <= width <= MAX_VIEWPORT_WIDTH:
        raise argparse.ArgumentTypeError(
            f"width must be between {MIN_VIEWPORT_WIDTH} and {MAX_VIEWPORT_WIDTH} pixels"
        )
    return width


def build_service(data_file: str) -> WeatherChartService:
    """Wire the repository, renderer and chart settings together."""
    return WeatherChartService(
        weather_repo=CSVWeatherRepository(data_file, REQUIRED_COLUMNS),
        renderer=MatplotlibChartRenderer(),
        bar_chart_settings=BAR_CHART_SETTINGS,
        scatter_plot_settings=SCATTER_PLOT_SETTINGS,
        line_graph_settings=LINE_GRAPH_SETTINGS,
        container_ids=CONTAINER_IDS,
        default_viewport_width=VIEWPORT_WIDTH,
    )


def render(service: WeatherChartService, output_dir: Path, viewport_width: int) -> int:
    """Write index.html and one SVG per chart. Returns the exit status."""
    page = service.render_page(viewport_width)

    output_dir.mkdir(parents=True, exist_ok=True)
    index_file = output_dir / "index.html"
    index_file.write_text(
        render_page_html(page, CONTAINER_IDS, API_SETTINGS["title"]), encoding="utf-8"
    )

    # The service has already logged the load failure
    if page.load_failed:
        return 1

    for name, filename in SVG_FILES.items():
        svg_file = output_dir / filename
        svg_file.write_text(page.svg(CONTAINER_IDS[name]), encoding="utf-8")
        logger.info(f"Wrote {svg_file}")

    logger.info(f"Wrote {index_file}")
    return 0


def summarize(service: WeatherChartService) -> int:
    """Print monthly precipitation totals. Returns the exit status."""
    try:
        totals = service.monthly_precipitation()
    except (OSError, ValueError) as e:
        logger.error(f"Error loading data: {e}")
        return 1

    print("\n" + "=" * 40)
    print(" MONTHLY PRECIPITATION ")
    print("=" * 40)
    for item in totals:
        print(f" {item.month:<12} {item.total_precipitation:>10.2f}")
    print("=" * 40)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Atlanta weather charts (2020-2022)")
    parser.add_argument(
        "--data", type=str, default=str(WEATHER_DATA_FILE), help="Weather CSV file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === render: bar, scatter and line charts into an HTML page ===
    render_parser = subparsers.add_parser(
        "render", help="Render the three charts into index.html and standalone SVG files"
    )
    render_parser.add_argument(
        "--output-dir", type=str, default=str(OUTPUT_DIR), help="Directory for the rendered page"
    )
    render_parser.add_argument(
        "--viewport-width",
        type=viewport_width,
        default=VIEWPORT_WIDTH,
        help="Page width in pixels; the line graph spans it",
    )

    # === summarize: monthly precipitation table ===
    subparsers.add_parser("summarize", help="Print total precipitation per month")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    service = build_service(args.data)

    if args.command == "render":
        return render(service, Path(args.output_dir), args.viewport_width)
    elif args.command == "summarize":
        return summarize(service)
    return 2


if __name__ == "__main__":
    sys.exit(main())
