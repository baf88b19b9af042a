"""
Chart data entities: everything a renderer needs to draw one chart.

Each mark carries both its data values and its pixel geometry. A renderer
may draw from either: the matplotlib renderer plots data values on axes
whose limits are the scale domains and whose extent is the scale range,
so every mark lands on the pixel position stored here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import pandas as pd

from .monthly_precipitation import MonthlyPrecipitation
from .scale import BandScale, LinearScale, SequentialColorScale, TimeScale


@dataclass(frozen=True)
class Margin:
    """Space around the plotting area, in pixels."""

    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "Margin":
        """Create Margin from dictionary definition."""
        return cls(
            top=definition["top"],
            right=definition["right"],
            bottom=definition["bottom"],
            left=definition["left"],
        )


@dataclass(frozen=True)
class Bar:
    """One bar of the bar chart, in pixel coordinates (y grows downwards)."""

    month: str
    total_precipitation: float
    x: float
    y: float
    width: float
    height: float


@dataclass
class BarChartData:
    """Monthly precipitation bars with their scales."""

    width: int
    height: int
    margin: Margin
    aggregates: List[MonthlyPrecipitation]
    x_scale: BandScale
    y_scale: LinearScale
    bars: List[Bar]
    fill: str = "steelblue"
    x_title: str = "Month"
    y_title: str = "Total Precipitation"
    legend_title: str = "Monthly Precipitation"


@dataclass(frozen=True)
class ScatterPoint:
    """One marker of the scatter plot, in pixel coordinates."""

    cx: float
    cy: float
    r: float
    color: str
    pressure: float
    dewpoint: float
    precip: float
    temp_diff: float


@dataclass(frozen=True)
class SizeLegendEntry:
    """Reference bubble of the precipitation size legend."""

    precip: float
    r: float

    @property
    def label(self) -> str:
        return f"{self.precip:.1f}"


@dataclass
class ScatterPlotData:
    """Pressure/dewpoint markers sized by precipitation, coloured by temperature range."""

    width: int
    height: int
    margin: Margin
    x_scale: LinearScale
    y_scale: LinearScale
    radius_scale: LinearScale
    color_scale: SequentialColorScale
    points: List[ScatterPoint]
    size_legend: List[SizeLegendEntry]
    opacity: float = 0.8
    x_title: str = "Pressure"
    y_title: str = "Dewpoint"
    color_legend_title: str = "Difference in Max and Min Temperatures"
    size_legend_title: str = "Precipitation"


@dataclass(frozen=True)
class LineSeries:
    """A named line path through (x, y) pixel positions inside the plotting area."""

    name: str
    label: str
    color: str
    xs: Tuple[float, ...]
    ys: Tuple[float, ...]
    dates: Tuple[pd.Timestamp, ...] = field(repr=False, default=())
    values: Tuple[float, ...] = field(repr=False, default=())


@dataclass
class LineGraphData:
    """Max and min daily temperature over time."""

    viewport_width: int
    width: int  # plotting area width
    height: int  # plotting area height
    margin: Margin
    x_scale: TimeScale
    y_scale: LinearScale
    series: List[LineSeries]
    x_title: str = "Date"
    y_title: str = "Temperature (°F)"

    @property
    def full_width(self) -> int:
        return self.viewport_width

    @property
    def full_height(self) -> int:
        return self.height + self.margin.top + self.margin.bottom


@dataclass
class ChartPage:
    """The rendered page: SVG markup keyed by container id."""

    containers: Dict[str, str]
    load_failed: bool = False

    def svg(self, container_id: str) -> str:
        return self.containers.get(container_id, "")

    @property
    def is_empty(self) -> bool:
        return not any(self.containers.values())
