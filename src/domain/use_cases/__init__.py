"""Use cases - core business operations."""

from .parse_weather_data import ParseWeatherDataUseCase
from .aggregate_monthly_precipitation import AggregateMonthlyPrecipitationUseCase
from .build_bar_chart import BuildBarChartUseCase
from .build_scatter_plot import BuildScatterPlotUseCase
from .build_line_graph import BuildLineGraphUseCase

__all__ = [
    "ParseWeatherDataUseCase",
    "AggregateMonthlyPrecipitationUseCase",
    "BuildBarChartUseCase",
    "BuildScatterPlotUseCase",
    "BuildLineGraphUseCase",
]
