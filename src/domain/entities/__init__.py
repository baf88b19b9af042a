"""Domain entities."""

from .weather_record import WeatherRecord
from .monthly_precipitation import MonthlyPrecipitation
from .scale import BandScale, LinearScale, SequentialColorScale, TimeScale, extent
from .chart_data import (
    Bar,
    BarChartData,
    ChartPage,
    LineGraphData,
    LineSeries,
    Margin,
    ScatterPlotData,
    ScatterPoint,
    SizeLegendEntry,
)

__all__ = [
    "WeatherRecord",
    "MonthlyPrecipitation",
    "BandScale",
    "LinearScale",
    "SequentialColorScale",
    "TimeScale",
    "extent",
    "Bar",
    "BarChartData",
    "ChartPage",
    "LineGraphData",
    "LineSeries",
    "Margin",
    "ScatterPlotData",
    "ScatterPoint",
    "SizeLegendEntry",
]
