"""Renderer interfaces."""

from .chart_renderer import ChartRenderer

__all__ = [
    "ChartRenderer",
]
