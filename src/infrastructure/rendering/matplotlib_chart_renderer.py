"""Matplotlib implementation of the chart renderer."""

import io
import logging
import math
from typing import Any, Dict, Optional, Sequence

import matplotlib
import matplotlib.dates as mdates
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Normalize
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from ...domain.entities.chart_data import BarChartData, LineGraphData, Margin, ScatterPlotData
from ...domain.renderers.chart_renderer import ChartRenderer

logger = logging.getLogger(__name__)

# SVG output is written at 72 pt per inch; sizing figures at 96 px per inch
# makes one SVG unit equal one CSS pixel.
PX_PER_INCH = 96
PT_PER_PX = 72 / PX_PER_INCH

DEFAULT_RC_PARAMS = {
    "svg.fonttype": "none",
    "svg.hashsalt": "atl-weather-charts",
    "font.size": 9,
    "axes.spines.top": False,
    "axes.spines.right": False,
}


class MatplotlibChartRenderer(ChartRenderer):
    """Draws chart data on matplotlib figures and serialises them to SVG.

    Figures are created through ``matplotlib.figure.Figure`` rather than
    pyplot, so no global figure state is kept between renders.
    """

    def __init__(self, rc_params: Optional[Dict[str, Any]] = None):
        """
        Initialize renderer.

        Args:
            rc_params: Matplotlib rc overrides applied while drawing
        """
        self.rc_params = {**DEFAULT_RC_PARAMS, **(rc_params or {})}

    # === SVG output ===

    def render_bar_chart(self, data: BarChartData) -> str:
        with matplotlib.rc_context(self.rc_params):
            return self.to_svg(self.bar_chart_figure(data))

    def render_scatter_plot(self, data: ScatterPlotData) -> str:
        with matplotlib.rc_context(self.rc_params):
            return self.to_svg(self.scatter_plot_figure(data))

    def render_line_graph(self, data: LineGraphData) -> str:
        with matplotlib.rc_context(self.rc_params):
            return self.to_svg(self.line_graph_figure(data))

    @staticmethod
    def to_svg(fig: Figure) -> str:
        """Serialise a figure to inline SVG markup (no XML prolog)."""
        buffer = io.StringIO()
        fig.savefig(buffer, format="svg", metadata={"Date": None})
        svg = buffer.getvalue()
        start = svg.find("<svg")
        return svg[start:] if start >= 0 else svg

    # === Figures ===

    def bar_chart_figure(self, data: BarChartData) -> Figure:
        """Bars positioned in pixels along x, precipitation along y."""
        fig = _new_figure(data.width, data.height)
        ax = _plot_axes(fig, data.width, data.height, data.margin)

        # x is measured in pixels so band positions are used as-is
        ax.set_xlim(*data.x_scale.range)
        _set_limits(ax.set_ylim, data.y_scale.domain)

        container = ax.bar(
            [b.x for b in data.bars],
            [b.total_precipitation for b in data.bars],
            width=data.x_scale.bandwidth,
            align="edge",
            color=data.fill,
        )
        for i, patch in enumerate(container.patches):
            patch.set_gid(f"bar-{i}")

        ax.set_xticks(
            [b.x + b.width / 2 for b in data.bars],
            labels=[b.month for b in data.bars],
        )
        ticks = data.y_scale.ticks()
        if ticks:
            ax.set_yticks(ticks)

        ax.set_xlabel(data.x_title)
        ax.set_ylabel(data.y_title)

        legend = ax.legend(
            handles=[Patch(facecolor=data.fill, label=data.legend_title)],
            loc="upper right",
            frameon=False,
            prop={"weight": "bold"},
        )
        legend.set_gid("legend")

        logger.debug(f"Drew bar chart with {len(container.patches)} bars")
        return fig

    def scatter_plot_figure(self, data: ScatterPlotData) -> Figure:
        """Markers sized by precipitation and coloured by temperature range."""
        fig = _new_figure(data.width, data.height)
        ax = _plot_axes(fig, data.width, data.height, data.margin)

        _set_limits(ax.set_xlim, data.x_scale.domain)
        _set_limits(ax.set_ylim, data.y_scale.domain)

        if data.points:
            markers = ax.scatter(
                [p.pressure for p in data.points],
                [p.dewpoint for p in data.points],
                s=[_marker_area(p.r) for p in data.points],
                c=[p.color for p in data.points],
                alpha=data.opacity,
                linewidths=0,
                clip_on=False,
            )
            markers.set_gid("markers")

        ax.set_xlabel(data.x_title)
        ax.set_ylabel(data.y_title)

        self._color_legend(fig, data)

        handles = [
            Line2D(
                [],
                [],
                linestyle="none",
                marker="o",
                markersize=2 * entry.r * PT_PER_PX,
                markerfacecolor="none",
                markeredgecolor="black",
                label=entry.label,
            )
            for entry in data.size_legend
            if not math.isnan(entry.r)
        ]
        size_legend = ax.legend(
            handles=handles,
            title=data.size_legend_title,
            title_fontproperties={"weight": "bold"},
            loc="upper left",
            frameon=False,
            labelspacing=1.5,
            borderpad=0.8,
        )
        size_legend.set_gid("size-legend")

        logger.debug(f"Drew scatter plot with {len(data.points)} markers")
        return fig

    def line_graph_figure(self, data: LineGraphData) -> Figure:
        """Max and min temperature lines against date."""
        fig = _new_figure(data.full_width, data.full_height)
        ax = _plot_axes(fig, data.full_width, data.full_height, data.margin)

        for series in data.series:
            (line,) = ax.plot(
                pd.DatetimeIndex(series.dates),
                list(series.values),
                color=series.color,
                linewidth=1.5,
                label=series.label,
            )
            line.set_gid(f"line-{series.name}")

        start, end = data.x_scale.domain
        if not pd.isna(start) and not pd.isna(end) and start != end:
            ax.set_xlim(start, end)
        _set_limits(ax.set_ylim, data.y_scale.domain)

        locator = mdates.AutoDateLocator()
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))

        ax.set_xlabel(data.x_title)
        ax.set_ylabel(data.y_title)

        legend = ax.legend(loc="upper right", frameon=False)
        legend.set_gid("legend")

        logger.debug(f"Drew line graph {data.full_width}x{data.full_height}px")
        return fig

    # === Legends ===

    @staticmethod
    def _color_legend(fig: Figure, data: ScatterPlotData) -> None:
        """Vertical gradient from Low (top) to High (bottom)."""
        width, height = data.width, data.height
        cax = fig.add_axes(
            [(width - 100) / width, 1 - (20 + 100) / height, 20 / width, 100 / height]
        )
        cax.set_gid("color-legend")

        low, high = data.color_scale.domain
        if math.isnan(low) or math.isnan(high):
            low, high = 0.0, 1.0
        elif high <= low:
            high = low + 1.0
        norm = Normalize(vmin=low, vmax=high)

        colorbar = fig.colorbar(ScalarMappable(norm=norm, cmap=data.color_scale.colormap), cax=cax)
        colorbar.set_ticks([low, high], labels=["Low", "High"])
        colorbar.outline.set_visible(False)
        cax.invert_yaxis()
        cax.set_title(data.color_legend_title, loc="right", fontweight="bold")


def _new_figure(width: int, height: int) -> Figure:
    return Figure(figsize=(width / PX_PER_INCH, height / PX_PER_INCH), dpi=PX_PER_INCH)


def _plot_axes(fig: Figure, width: int, height: int, margin: Margin) -> Axes:
    """Axes filling the figure minus the margins."""
    return fig.add_axes(
        [
            margin.left / width,
            margin.bottom / height,
            (width - margin.left - margin.right) / width,
            (height - margin.top - margin.bottom) / height,
        ]
    )


def _set_limits(setter, domain: Sequence[float]) -> None:
    """Apply a domain as axis limits when it is finite and non-empty."""
    low, high = domain
    if math.isnan(low) or math.isnan(high) or low == high:
        return
    setter(low, high)


def _marker_area(radius_px: float) -> float:
    """Scatter marker area in pt^2 for a radius in pixels."""
    return (2 * radius_px * PT_PER_PX) ** 2
