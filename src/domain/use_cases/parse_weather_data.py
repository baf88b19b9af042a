"""Use case for coercing raw weather rows into typed values."""

import logging
from typing import List, Sequence

import pandas as pd

from ..entities.weather_record import WeatherRecord

logger = logging.getLogger(__name__)

NUMERIC_COLUMNS = ("Precip", "Pressure", "Dewpoint", "TempMax", "TempMin")


class ParseWeatherDataUseCase:
    """Use case to parse dates, coerce numbers and derive the temperature range."""

    def __init__(self, numeric_columns: Sequence[str] = NUMERIC_COLUMNS):
        """
        Initialize use case.

        Args:
            numeric_columns: Columns coerced to floating point
        """
        self.numeric_columns = list(numeric_columns)

    def execute(self, raw: pd.DataFrame) -> pd.DataFrame:
        """
        Execute the use case.

        The raw frame is left untouched. Values that do not parse become
        NaT/NaN instead of raising.

        Args:
            raw: DataFrame of text values as read from the CSV

        Returns:
            New DataFrame with a datetime ``Date`` column, float numeric
            columns and a ``TempDiff`` column
        """
        df = raw.copy()

        df["Date"] = pd.to_datetime(
            df["Date"].astype(str).str.strip(), errors="coerce", format="mixed"
        )
        for col in self.numeric_columns:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col].astype(str).str.strip(), errors="coerce")

        df["TempDiff"] = df["TempMax"] - df["TempMin"]

        invalid = int(df["Date"].isna().sum())
        if invalid:
            logger.debug(f"{invalid} rows have an unparseable date")
        return df

    @staticmethod
    def to_records(parsed: pd.DataFrame) -> List[WeatherRecord]:
        """Convert a parsed DataFrame to WeatherRecord entities."""
        result = []
        for _, row in parsed.iterrows():
            result.append(
                WeatherRecord(
                    date=row["Date"].date() if pd.notna(row["Date"]) else None,
                    precip=float(row["Precip"]),
                    pressure=float(row["Pressure"]),
                    dewpoint=float(row["Dewpoint"]),
                    temp_max=float(row["TempMax"]),
                    temp_min=float(row["TempMin"]),
                )
            )
        return result
