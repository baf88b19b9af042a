"""Use case for laying out the monthly precipitation bar chart."""

import logging
import math
from typing import Any, Dict, Optional

import pandas as pd

from ..entities.chart_data import Bar, BarChartData, Margin
from ..entities.scale import BandScale, LinearScale
from .aggregate_monthly_precipitation import AggregateMonthlyPrecipitationUseCase
from .parse_weather_data import ParseWeatherDataUseCase

logger = logging.getLogger(__name__)


class BuildBarChartUseCase:
    """Use case to turn raw weather rows into monthly precipitation bars."""

    def __init__(
        self,
        settings: Dict[str, Any],
        parser: Optional[ParseWeatherDataUseCase] = None,
        aggregator: Optional[AggregateMonthlyPrecipitationUseCase] = None,
    ):
        """
        Initialize use case.

        Args:
            settings: Chart geometry (width, height, margin, padding, fill)
            parser: Parser for the raw rows
            aggregator: Monthly precipitation aggregator
        """
        self.width = settings["width"]
        self.height = settings["height"]
        self.margin = Margin.from_dict(settings["margin"])
        self.padding = settings.get("padding", 0.1)
        self.fill = settings.get("fill", "steelblue")
        self.parser = parser or ParseWeatherDataUseCase()
        self.aggregator = aggregator or AggregateMonthlyPrecipitationUseCase()

    def execute(self, raw: pd.DataFrame) -> BarChartData:
        """
        Execute the use case.

        Args:
            raw: Raw weather rows

        Returns:
            BarChartData with one bar per month
        """
        parsed = self.parser.execute(raw)
        aggregates = self.aggregator.execute(parsed)

        x_scale = BandScale(
            domain=[a.month for a in aggregates],
            range=(self.margin.left, self.width - self.margin.right),
            padding=self.padding,
        )
        max_total = max((a.total_precipitation for a in aggregates), default=math.nan)
        if max_total <= 0:
            # No rain at all: keep zero on the baseline instead of mid-range
            max_total = 1.0
        y_scale = LinearScale(
            domain=(0.0, max_total),
            range=(self.height - self.margin.bottom, self.margin.top),
        )

        baseline = self.height - self.margin.bottom
        bars = []
        for aggregate in aggregates:
            y = y_scale(aggregate.total_precipitation)
            bars.append(
                Bar(
                    month=aggregate.month,
                    total_precipitation=aggregate.total_precipitation,
                    x=x_scale(aggregate.month),
                    y=y,
                    width=x_scale.bandwidth,
                    height=baseline - y,
                )
            )

        logger.info(f"Built bar chart with {len(bars)} bars")
        return BarChartData(
            width=self.width,
            height=self.height,
            margin=self.margin,
            aggregates=aggregates,
            x_scale=x_scale,
            y_scale=y_scale,
            bars=bars,
            fill=self.fill,
        )
