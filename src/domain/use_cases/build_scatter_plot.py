"""Use case for laying out the pressure/dewpoint scatter plot."""

import logging
import math
from typing import Any, Dict, Optional

import pandas as pd

from ..entities.chart_data import Margin, ScatterPlotData, ScatterPoint, SizeLegendEntry
from ..entities.scale import LinearScale, SequentialColorScale, extent
from .parse_weather_data import ParseWeatherDataUseCase

logger = logging.getLogger(__name__)


class BuildScatterPlotUseCase:
    """Use case to map each day onto a sized, coloured marker."""

    def __init__(self, settings: Dict[str, Any], parser: Optional[ParseWeatherDataUseCase] = None):
        """
        Initialize use case.

        Args:
            settings: Chart geometry, radius range, colormap and legend sizes
            parser: Parser for the raw rows
        """
        self.width = settings["width"]
        self.height = settings["height"]
        self.margin = Margin.from_dict(settings["margin"])
        self.radius_range = tuple(settings.get("radius_range", (3.0, 20.0)))
        self.colormap = settings.get("colormap", "viridis")
        self.opacity = settings.get("opacity", 0.8)
        self.legend_sizes = tuple(settings.get("legend_sizes", (1.0, 3.0, 5.0)))
        self.parser = parser or ParseWeatherDataUseCase()

    def execute(self, raw: pd.DataFrame) -> ScatterPlotData:
        """
        Execute the use case.

        Args:
            raw: Raw weather rows

        Returns:
            ScatterPlotData with one marker per drawable row
        """
        parsed = self.parser.execute(raw)

        x_scale = LinearScale(
            domain=extent(parsed["Pressure"]),
            range=(self.margin.left, self.width - self.margin.right),
        )
        y_scale = LinearScale(
            domain=extent(parsed["Dewpoint"]),
            range=(self.height - self.margin.bottom, self.margin.top),
        )
        radius_scale = LinearScale(
            domain=extent(parsed["Precip"]),
            range=self.radius_range,
            clamp=True,
        )
        color_scale = SequentialColorScale(domain=extent(parsed["TempDiff"]), cmap=self.colormap)

        points = []
        for row in parsed.itertuples(index=False):
            cx = x_scale(row.Pressure)
            cy = y_scale(row.Dewpoint)
            r = radius_scale(row.Precip)
            if math.isnan(cx) or math.isnan(cy) or math.isnan(r):
                continue
            points.append(
                ScatterPoint(
                    cx=cx,
                    cy=cy,
                    r=r,
                    color=color_scale(row.TempDiff),
                    pressure=float(row.Pressure),
                    dewpoint=float(row.Dewpoint),
                    precip=float(row.Precip),
                    temp_diff=float(row.TempDiff),
                )
            )

        skipped = len(parsed) - len(points)
        if skipped:
            logger.debug(f"Skipped {skipped} rows without a drawable marker")

        size_legend = [
            SizeLegendEntry(precip=float(size), r=radius_scale(size)) for size in self.legend_sizes
        ]

        logger.info(f"Built scatter plot with {len(points)} markers")
        return ScatterPlotData(
            width=self.width,
            height=self.height,
            margin=self.margin,
            x_scale=x_scale,
            y_scale=y_scale,
            radius_scale=radius_scale,
            color_scale=color_scale,
            points=points,
            size_legend=size_legend,
            opacity=self.opacity,
        )
