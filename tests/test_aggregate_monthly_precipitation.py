"""Tests for AggregateMonthlyPrecipitationUseCase."""

import pytest

from src.domain.use_cases.aggregate_monthly_precipitation import (
    AggregateMonthlyPrecipitationUseCase,
)
from src.domain.use_cases.parse_weather_data import ParseWeatherDataUseCase


def aggregate(raw):
    parsed = ParseWeatherDataUseCase().execute(raw)
    return AggregateMonthlyPrecipitationUseCase().execute(parsed)


def test_totals_per_month(raw_weather):
    """Totals equal the sum of Precip over each month's rows."""
    result = aggregate(raw_weather)
    totals = {item.month: item.total_precipitation for item in result}

    # January 2020 and January 2021 share one group
    assert totals["January"] == pytest.approx(0.25 + 1.10 + 0.65)
    assert totals["February"] == pytest.approx(3.20)
    assert totals["March"] == pytest.approx(0.40)


def test_first_seen_order_and_uniqueness(raw_weather):
    """Months appear once, in the order first seen in the data."""
    months = [item.month for item in aggregate(raw_weather)]
    assert months == ["January", "February", "March"]


def test_malformed_rows(raw_malformed):
    """Undated rows are dropped and NaN precipitation adds nothing."""
    totals = {item.month: item.total_precipitation for item in aggregate(raw_malformed)}
    assert totals == {"January": pytest.approx(0.25), "February": pytest.approx(0.50)}
