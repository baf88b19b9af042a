"""FastAPI main application."""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from ...application.services.weather_chart_service import WeatherChartService
from ...infrastructure.rendering.matplotlib_chart_renderer import MatplotlibChartRenderer
from ...infrastructure.repositories.csv_weather_repository import CSVWeatherRepository
from ..page import PAGE_TEMPLATE, page_context, templates
from config.settings import (
    API_SETTINGS,
    BAR_CHART_SETTINGS,
    CONTAINER_IDS,
    LINE_GRAPH_SETTINGS,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_VIEWPORT_WIDTH,
    MIN_VIEWPORT_WIDTH,
    REQUIRED_COLUMNS,
    SCATTER_PLOT_SETTINGS,
    VIEWPORT_WIDTH,
    WEATHER_DATA_FILE,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repository and service
weather_repo = CSVWeatherRepository(str(WEATHER_DATA_FILE), REQUIRED_COLUMNS)

service = WeatherChartService(
    weather_repo=weather_repo,
    renderer=MatplotlibChartRenderer(),
    bar_chart_settings=BAR_CHART_SETTINGS,
    scatter_plot_settings=SCATTER_PLOT_SETTINGS,
    line_graph_settings=LINE_GRAPH_SETTINGS,
    container_ids=CONTAINER_IDS,
    default_viewport_width=VIEWPORT_WIDTH,
)


# Response models
class MonthlyPrecipitationResponse(BaseModel):
    """Response model for one month of precipitation."""

    month: str
    total_precipitation: float


# API endpoints
@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    width: Optional[int] = Query(
        None, ge=MIN_VIEWPORT_WIDTH, le=MAX_VIEWPORT_WIDTH, description="Viewport width in pixels"
    ),
):
    """Page with the bar chart, scatter plot and line graph."""
    page = await run_in_threadpool(service.render_page, width)
    return templates.TemplateResponse(
        request, PAGE_TEMPLATE, page_context(page, CONTAINER_IDS, API_SETTINGS["title"])
    )


@app.get("/charts/{name}.svg")
async def chart(
    name: str,
    width: Optional[int] = Query(
        None, ge=MIN_VIEWPORT_WIDTH, le=MAX_VIEWPORT_WIDTH, description="Viewport width in pixels"
    ),
):
    """
    Render one chart as a standalone SVG document.

    Args:
        name: 'bar', 'scatter' or 'line'
        width: Viewport width for the line graph
    """
    if name not in CONTAINER_IDS:
        raise HTTPException(status_code=404, detail=f"Unknown chart: {name}")

    try:
        raw = await run_in_threadpool(service.load)
    except (OSError, ValueError) as e:
        logger.error(f"Error loading data: {e}")
        raise HTTPException(status_code=503, detail="Weather data unavailable")

    svg = await run_in_threadpool(service.render_chart, name, raw, width)
    return Response(content=svg, media_type="image/svg+xml")


@app.get("/monthly-precipitation", response_model=List[MonthlyPrecipitationResponse])
async def monthly_precipitation() -> List[MonthlyPrecipitationResponse]:
    """Total precipitation per month, in first-seen order."""
    try:
        totals = await run_in_threadpool(service.monthly_precipitation)
    except (OSError, ValueError) as e:
        logger.error(f"Error loading data: {e}")
        raise HTTPException(status_code=503, detail="Weather data unavailable")

    return [
        MonthlyPrecipitationResponse(month=t.month, total_precipitation=t.total_precipitation)
        for t in totals
    ]


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
