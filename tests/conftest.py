"""Shared fixtures: small weather CSV files and a wired-up chart service."""

import pytest

from config.settings import (
    BAR_CHART_SETTINGS,
    CONTAINER_IDS,
    LINE_GRAPH_SETTINGS,
    REQUIRED_COLUMNS,
    SCATTER_PLOT_SETTINGS,
)
from src.application.services.weather_chart_service import WeatherChartService
from src.infrastructure.rendering.matplotlib_chart_renderer import MatplotlibChartRenderer
from src.infrastructure.repositories.csv_weather_repository import CSVWeatherRepository

HEADER = "Date,Precip,Pressure,Dewpoint,TempMax,TempMin\n"

# January (two years), February and March; January total is 2.0
SAMPLE_ROWS = (
    "2020-01-01,0.25,30.12,41.0,58.0,39.0\n"
    "2020-01-02,1.10,29.95,48.5,61.0,50.0\n"
    "2020-02-01,0.00,30.40,22.0,45.0,28.0\n"
    "2020-02-15,3.20,29.70,55.0,64.0,52.0\n"
    "2021-01-10,0.65,30.05,35.0,52.0,33.0\n"
    "2020-03-20,0.40,30.20,44.0,72.0,46.0\n"
)

THREE_MONTH_ROWS = (
    "2020-01-15,1.5,30.1,35.0,55.0,40.0\n"
    "2020-02-10,0.5,29.9,30.0,50.0,32.0\n"
    "2020-03-05,2.0,30.3,45.0,68.0,48.0\n"
)

MALFORMED_ROWS = (
    "2020-01-01,0.25,30.12,41.0,58.0,39.0\n"
    "not a date,1.00,30.00,40.0,60.0,40.0\n"
    "2020-01-03,n/a,29.90,38.0,55.0,37.0\n"
    "2020-02-01,0.50,bad,30.0,50.0,30.0\n"
)

# No rain on any day
DRY_ROWS = (
    "2020-01-01,0.00,30.12,41.0,58.0,39.0\n"
    "2020-01-02,0.00,29.95,48.5,61.0,50.0\n"
    "2020-02-01,0.00,30.40,22.0,45.0,28.0\n"
)


def write_csv(path, rows, header=HEADER):
    path.write_text(header + rows, encoding="utf-8")
    return path


@pytest.fixture
def weather_csv(tmp_path):
    return write_csv(tmp_path / "weather.csv", SAMPLE_ROWS)


@pytest.fixture
def three_month_csv(tmp_path):
    return write_csv(tmp_path / "three_months.csv", THREE_MONTH_ROWS)


@pytest.fixture
def malformed_csv(tmp_path):
    return write_csv(tmp_path / "malformed.csv", MALFORMED_ROWS)


@pytest.fixture
def dry_csv(tmp_path):
    return write_csv(tmp_path / "dry.csv", DRY_ROWS)


@pytest.fixture
def raw_weather(weather_csv):
    return CSVWeatherRepository(str(weather_csv), REQUIRED_COLUMNS).get_raw_data()


@pytest.fixture
def raw_three_months(three_month_csv):
    return CSVWeatherRepository(str(three_month_csv), REQUIRED_COLUMNS).get_raw_data()


@pytest.fixture
def raw_malformed(malformed_csv):
    return CSVWeatherRepository(str(malformed_csv), REQUIRED_COLUMNS).get_raw_data()


@pytest.fixture
def raw_dry(dry_csv):
    return CSVWeatherRepository(str(dry_csv), REQUIRED_COLUMNS).get_raw_data()


def make_service(data_file, viewport_width=1000):
    return WeatherChartService(
        weather_repo=CSVWeatherRepository(str(data_file), REQUIRED_COLUMNS),
        renderer=MatplotlibChartRenderer(),
        bar_chart_settings=BAR_CHART_SETTINGS,
        scatter_plot_settings=SCATTER_PLOT_SETTINGS,
        line_graph_settings=LINE_GRAPH_SETTINGS,
        container_ids=CONTAINER_IDS,
        default_viewport_width=viewport_width,
    )


@pytest.fixture
def service(weather_csv):
    return make_service(weather_csv)


@pytest.fixture
def missing_file_service(tmp_path):
    return make_service(tmp_path / "does_not_exist.csv")


@pytest.fixture
def service_factory():
    return make_service
