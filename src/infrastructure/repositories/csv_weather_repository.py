"""CSV file weather repository implementation."""

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class CSVWeatherRepository(WeatherRepository):
    """Repository for daily weather rows stored in a local CSV file."""

    def __init__(self, data_file: str, required_columns: Iterable[str]):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV file with weather data
            required_columns: Columns the header must contain
        """
        self.data_file = Path(data_file)
        self.required_columns = list(required_columns)

    def get_raw_data(self) -> pd.DataFrame:
        """Read every row of the CSV file as text."""
        if not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {self.data_file}")

        logger.info(f"Loading weather data from {self.data_file}")

        # Keep values as written; coercion happens per chart
        df = pd.read_csv(self.data_file, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in self.required_columns if c not in df.columns]
        if missing:
            raise ValueError(
                f"Weather data file {self.data_file} is missing columns: {', '.join(missing)}"
            )

        logger.info(f"Loaded {len(df)} weather rows")
        return df
