"""Main service rendering the weather chart page."""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from ...domain.entities.chart_data import BarChartData, ChartPage, LineGraphData, ScatterPlotData
from ...domain.entities.monthly_precipitation import MonthlyPrecipitation
from ...domain.renderers.chart_renderer import ChartRenderer
from ...domain.repositories.weather_repository import WeatherRepository

# Use cases
from ...domain.use_cases.aggregate_monthly_precipitation import AggregateMonthlyPrecipitationUseCase
from ...domain.use_cases.build_bar_chart import BuildBarChartUseCase
from ...domain.use_cases.build_line_graph import BuildLineGraphUseCase
from ...domain.use_cases.build_scatter_plot import BuildScatterPlotUseCase
from ...domain.use_cases.parse_weather_data import ParseWeatherDataUseCase

logger = logging.getLogger(__name__)


class WeatherChartService:
    """Loads the weather rows once and renders the bar, scatter and line charts."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        renderer: ChartRenderer,
        bar_chart_settings: Dict[str, Any],
        scatter_plot_settings: Dict[str, Any],
        line_graph_settings: Dict[str, Any],
        container_ids: Dict[str, str],
        default_viewport_width: int = 1280,
    ):
        self.weather_repo = weather_repo
        self.renderer = renderer
        self.container_ids = dict(container_ids)
        self.default_viewport_width = default_viewport_width

        # Use cases
        self.parse_uc = ParseWeatherDataUseCase()
        self.aggregate_uc = AggregateMonthlyPrecipitationUseCase()
        self.bar_chart_uc = BuildBarChartUseCase(bar_chart_settings, self.parse_uc, self.aggregate_uc)
        self.scatter_plot_uc = BuildScatterPlotUseCase(scatter_plot_settings, self.parse_uc)
        self.line_graph_uc = BuildLineGraphUseCase(line_graph_settings, self.parse_uc)

    def load(self) -> pd.DataFrame:
        """Read the raw weather rows. Errors propagate to the caller."""
        return self.weather_repo.get_raw_data()

    def build_bar_chart(self, raw: pd.DataFrame) -> BarChartData:
        return self.bar_chart_uc.execute(raw)

    def build_scatter_plot(self, raw: pd.DataFrame) -> ScatterPlotData:
        return self.scatter_plot_uc.execute(raw)

    def build_line_graph(self, raw: pd.DataFrame, viewport_width: Optional[int] = None) -> LineGraphData:
        return self.line_graph_uc.execute(raw, viewport_width or self.default_viewport_width)

    def render_chart(self, name: str, raw: pd.DataFrame, viewport_width: Optional[int] = None) -> str:
        """
        Render a single chart to SVG.

        Args:
            name: One of 'bar', 'scatter', 'line'
            raw: Raw weather rows
            viewport_width: Page width for the line graph

        Returns:
            Inline SVG markup
        """
        if name == "bar":
            return self.renderer.render_bar_chart(self.build_bar_chart(raw))
        if name == "scatter":
            return self.renderer.render_scatter_plot(self.build_scatter_plot(raw))
        if name == "line":
            return self.renderer.render_line_graph(self.build_line_graph(raw, viewport_width))
        raise ValueError(f"Unknown chart: {name}")

    def render_page(self, viewport_width: Optional[int] = None) -> ChartPage:
        """
        Load the data and render all three charts into their containers.

        A load failure is logged once and yields a page with empty
        containers; it is never raised.

        Args:
            viewport_width: Page width for the line graph (default from settings)

        Returns:
            ChartPage with SVG markup per container id
        """
        empty = {container_id: "" for container_id in self.container_ids.values()}

        try:
            raw = self.load()
        except (OSError, ValueError) as e:
            logger.error(f"Error loading data: {e}")
            return ChartPage(containers=empty, load_failed=True)

        containers = dict(empty)
        for name, container_id in self.container_ids.items():
            containers[container_id] = self.render_chart(name, raw, viewport_width)
            logger.info(f"Rendered {name} chart into #{container_id}")

        return ChartPage(containers=containers)

    def monthly_precipitation(self) -> List[MonthlyPrecipitation]:
        """Monthly precipitation totals. Load errors propagate."""
        raw = self.load()
        return self.aggregate_uc.execute(self.parse_uc.execute(raw))
