"""Use case for summing precipitation per calendar month."""

import logging
from typing import List

import pandas as pd

from ..entities.monthly_precipitation import MonthlyPrecipitation

logger = logging.getLogger(__name__)


class AggregateMonthlyPrecipitationUseCase:
    """Use case to group parsed rows by month name and sum precipitation."""

    def execute(self, parsed: pd.DataFrame) -> List[MonthlyPrecipitation]:
        """
        Execute the use case.

        Months are keyed by full name only, so the same month of different
        years shares one total. Groups keep the order in which their month
        first appears. Rows without a valid date are left out and NaN
        precipitation counts as nothing.

        Args:
            parsed: Output of ParseWeatherDataUseCase

        Returns:
            List of MonthlyPrecipitation entities
        """
        months = parsed["Date"].dt.strftime("%B")
        totals = parsed["Precip"].groupby(months, sort=False).sum(min_count=0)

        result = [
            MonthlyPrecipitation(month=str(month), total_precipitation=float(total))
            for month, total in totals.items()
        ]
        logger.info(f"Aggregated precipitation into {len(result)} months")
        return result
