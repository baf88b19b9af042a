"""Concrete chart renderers."""

from .matplotlib_chart_renderer import MatplotlibChartRenderer

__all__ = [
    "MatplotlibChartRenderer",
]
