"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
WEATHER_DATA_FILE = Path(os.getenv("WEATHER_DATA_FILE", DATA_DIR / "atl_weather_20to22.csv"))

# Rendered page output
OUTPUT_DIR = Path(os.getenv("CHART_OUTPUT_DIR", BASE_DIR / "output"))

# Columns the weather CSV must provide
REQUIRED_COLUMNS = ["Date", "Precip", "Pressure", "Dewpoint", "TempMax", "TempMin"]

# Page containers, one per chart
CONTAINER_IDS = {
    "bar": "barChart",
    "scatter": "scatterplot",
    "line": "lineGraph",
}

# Width the line graph stretches to when the caller does not supply one
VIEWPORT_WIDTH = int(os.getenv("VIEWPORT_WIDTH", "1280"))

# Accepted viewport widths (pixels)
MIN_VIEWPORT_WIDTH = 200
MAX_VIEWPORT_WIDTH = 10000

# Chart geometry (pixels)
BAR_CHART_SETTINGS = {
    "width": 600,
    "height": 400,
    "margin": {"top": 50, "right": 50, "bottom": 50, "left": 60},
    "padding": 0.1,
    "fill": "steelblue",
}

SCATTER_PLOT_SETTINGS = {
    "width": 600,
    "height": 400,
    "margin": {"top": 50, "right": 20, "bottom": 50, "left": 60},
    "radius_range": (3.0, 20.0),
    "colormap": "viridis",
    "opacity": 0.8,
    "legend_sizes": (1.0, 3.0, 5.0),
}

LINE_GRAPH_SETTINGS = {
    "height": 350,
    "margin": {"top": 10, "right": 80, "bottom": 50, "left": 80},
    "max_color": "steelblue",
    "min_color": "orange",
}

# API settings
API_SETTINGS = {
    "title": "Atlanta Weather Charts",
    "description": "Bar, scatter and line charts of daily Atlanta weather, 2020-2022",
    "version": "1.0.0",
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
