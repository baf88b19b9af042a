"""Example usage of the weather chart service."""

import logging

from src.application.services.weather_chart_service import WeatherChartService
from src.infrastructure.rendering.matplotlib_chart_renderer import MatplotlibChartRenderer
from src.infrastructure.repositories.csv_weather_repository import CSVWeatherRepository
from config.settings import (
    BAR_CHART_SETTINGS,
    CONTAINER_IDS,
    LINE_GRAPH_SETTINGS,
    OUTPUT_DIR,
    REQUIRED_COLUMNS,
    SCATTER_PLOT_SETTINGS,
    WEATHER_DATA_FILE,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = WeatherChartService(
        weather_repo=CSVWeatherRepository(str(WEATHER_DATA_FILE), REQUIRED_COLUMNS),
        renderer=MatplotlibChartRenderer(),
        bar_chart_settings=BAR_CHART_SETTINGS,
        scatter_plot_settings=SCATTER_PLOT_SETTINGS,
        line_graph_settings=LINE_GRAPH_SETTINGS,
        container_ids=CONTAINER_IDS,
    )

    # Example 1: Monthly precipitation totals
    print("=" * 60)
    print("Example 1: Monthly precipitation")
    print("=" * 60)
    try:
        for item in service.monthly_precipitation():
            print(f"  {item}")
    except (OSError, ValueError) as e:
        logger.error(f"Could not aggregate precipitation: {e}")
        return

    # Example 2: Render the charts at a fixed page width
    print("\n" + "=" * 60)
    print("Example 2: Rendering the charts")
    print("=" * 60)
    page = service.render_page(viewport_width=1440)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    for container_id, svg in page.containers.items():
        svg_file = OUTPUT_DIR / f"{container_id}.svg"
        svg_file.write_text(svg, encoding="utf-8")
        print(f"  #{container_id}: {len(svg)} bytes -> {svg_file}")


if __name__ == "__main__":
    main()
