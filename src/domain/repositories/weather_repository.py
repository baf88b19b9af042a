"""Weather repository interface."""

from abc import ABC, abstractmethod

import pandas as pd


class WeatherRepository(ABC):
    """Abstract repository for weather data access."""

    @abstractmethod
    def get_raw_data(self) -> pd.DataFrame:
        """
        Retrieve the raw weather rows.

        Returns:
            DataFrame with one row per day and every value as text

        Raises:
            FileNotFoundError: If the data source does not exist
            ValueError: If the data cannot be read or lacks required columns
        """
        pass
