"""Use case for laying out the daily temperature line graph."""

import logging
import math
from typing import Any, Dict, Optional

import pandas as pd

from ..entities.chart_data import LineGraphData, LineSeries, Margin
from ..entities.scale import LinearScale, TimeScale, extent
from .parse_weather_data import ParseWeatherDataUseCase

logger = logging.getLogger(__name__)


class BuildLineGraphUseCase:
    """Use case to draw max and min temperature against date."""

    def __init__(self, settings: Dict[str, Any], parser: Optional[ParseWeatherDataUseCase] = None):
        """
        Initialize use case.

        Args:
            settings: Chart height, margin and series colours
            parser: Parser for the raw rows
        """
        self.margin = Margin.from_dict(settings["margin"])
        self.plot_height = settings["height"] - self.margin.top - self.margin.bottom
        self.max_color = settings.get("max_color", "steelblue")
        self.min_color = settings.get("min_color", "orange")
        self.parser = parser or ParseWeatherDataUseCase()

    def execute(self, raw: pd.DataFrame, viewport_width: int) -> LineGraphData:
        """
        Execute the use case.

        Args:
            raw: Raw weather rows
            viewport_width: Page width at render time; the graph spans it

        Returns:
            LineGraphData with a max and a min temperature series
        """
        plot_width = viewport_width - self.margin.left - self.margin.right
        if plot_width <= 0:
            raise ValueError(
                f"Viewport width {viewport_width}px leaves no room between the "
                f"{self.margin.left}px and {self.margin.right}px margins"
            )

        parsed = self.parser.execute(raw)

        dates = parsed["Date"]
        valid_dates = dates.dropna()
        if valid_dates.empty:
            date_domain = (pd.NaT, pd.NaT)
        else:
            date_domain = (valid_dates.min(), valid_dates.max())
        x_scale = TimeScale(domain=date_domain, range=(0.0, float(plot_width)))

        # Both series share one y domain spanning the coldest low and warmest high
        low, _ = extent(parsed["TempMin"])
        _, high = extent(parsed["TempMax"])
        y_scale = LinearScale(domain=(low, high), range=(float(self.plot_height), 0.0))

        xs = tuple(x_scale(d) for d in dates)
        series = [
            self._series("temp-max", "Max Temperature", self.max_color, dates, xs, parsed["TempMax"], y_scale),
            self._series("temp-min", "Min Temperature", self.min_color, dates, xs, parsed["TempMin"], y_scale),
        ]

        if any(math.isnan(x) for x in xs):
            logger.debug("Line graph has gaps where dates failed to parse")

        logger.info(f"Built line graph with {len(xs)} points per series, width {viewport_width}px")
        return LineGraphData(
            viewport_width=viewport_width,
            width=plot_width,
            height=self.plot_height,
            margin=self.margin,
            x_scale=x_scale,
            y_scale=y_scale,
            series=series,
        )

    @staticmethod
    def _series(name, label, color, dates, xs, values, y_scale) -> LineSeries:
        return LineSeries(
            name=name,
            label=label,
            color=color,
            xs=xs,
            ys=tuple(y_scale(v) for v in values),
            dates=tuple(dates),
            values=tuple(float(v) for v in values),
        )
