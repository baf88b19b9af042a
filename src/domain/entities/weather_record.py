"""Weather record entity."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WeatherRecord:
    """Represents one parsed day of weather observations.

    Fields that failed to parse are NaN (numbers) or None (date).
    """

    date: Optional[date]
    precip: float  # inches
    pressure: float  # inHg
    dewpoint: float  # Fahrenheit
    temp_max: float  # Fahrenheit
    temp_min: float  # Fahrenheit

    @property
    def temp_diff(self) -> float:
        """Daily temperature range."""
        return self.temp_max - self.temp_min

    @property
    def month(self) -> Optional[str]:
        """Full month name of the observation date."""
        if self.date is None:
            return None
        return self.date.strftime("%B")
