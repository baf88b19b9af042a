"""Tests for domain entities."""

import math
from datetime import date

from src.domain.entities.chart_data import ChartPage, Margin
from src.domain.entities.monthly_precipitation import MonthlyPrecipitation
from src.domain.entities.weather_record import WeatherRecord


def test_weather_record():
    """Test WeatherRecord entity."""
    record = WeatherRecord(
        date=date(2020, 7, 4),
        precip=0.3,
        pressure=30.01,
        dewpoint=68.0,
        temp_max=91.0,
        temp_min=72.5,
    )
    assert record.temp_diff == 18.5
    assert record.month == "July"


def test_weather_record_unparsed_fields():
    """Unparsed fields propagate as NaN / None."""
    record = WeatherRecord(
        date=None,
        precip=math.nan,
        pressure=30.0,
        dewpoint=40.0,
        temp_max=math.nan,
        temp_min=35.0,
    )
    assert record.month is None
    assert math.isnan(record.temp_diff)


def test_monthly_precipitation():
    """Test MonthlyPrecipitation entity."""
    item = MonthlyPrecipitation(month="March", total_precipitation=4.5)
    assert item.month == "March"
    assert str(item) == "March: 4.50"


def test_margin_from_dict():
    """Test Margin creation from settings."""
    margin = Margin.from_dict({"top": 50, "right": 20, "bottom": 50, "left": 60})
    assert (margin.top, margin.right, margin.bottom, margin.left) == (50, 20, 50, 60)


def test_chart_page():
    """Test ChartPage container lookup."""
    page = ChartPage(containers={"barChart": "<svg/>", "scatterplot": "", "lineGraph": ""})
    assert page.svg("barChart") == "<svg/>"
    assert page.svg("unknown") == ""
    assert not page.is_empty

    empty = ChartPage(containers={"barChart": "", "scatterplot": ""}, load_failed=True)
    assert empty.is_empty
