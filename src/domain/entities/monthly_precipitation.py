"""Monthly precipitation aggregate entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyPrecipitation:
    """Total precipitation for one calendar month name."""

    month: str  # e.g., 'January'
    total_precipitation: float

    def __str__(self) -> str:
        return f"{self.month}: {self.total_precipitation:.2f}"
