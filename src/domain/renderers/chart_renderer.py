"""Chart renderer interface."""

from abc import ABC, abstractmethod

from ..entities.chart_data import BarChartData, LineGraphData, ScatterPlotData


class ChartRenderer(ABC):
    """Abstract renderer turning chart data into SVG markup."""

    @abstractmethod
    def render_bar_chart(self, data: BarChartData) -> str:
        """
        Render the monthly precipitation bar chart.

        Args:
            data: Bars, scales and geometry

        Returns:
            Inline SVG markup
        """
        pass

    @abstractmethod
    def render_scatter_plot(self, data: ScatterPlotData) -> str:
        """
        Render the pressure/dewpoint scatter plot.

        Args:
            data: Markers, scales and legends

        Returns:
            Inline SVG markup
        """
        pass

    @abstractmethod
    def render_line_graph(self, data: LineGraphData) -> str:
        """
        Render the temperature line graph.

        Args:
            data: Series, scales and geometry

        Returns:
            Inline SVG markup
        """
        pass
