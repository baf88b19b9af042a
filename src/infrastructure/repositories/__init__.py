"""Concrete repository implementations."""

from .csv_weather_repository import CSVWeatherRepository

__all__ = [
    "CSVWeatherRepository",
]
