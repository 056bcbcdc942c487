"""Aggregation windows accepted by the statistics endpoints."""

from enum import Enum


class StatisticsPeriod(str, Enum):
    """Window for overview, workload, performance and KPI statistics."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    def __str__(self) -> str:
        return self.value


class TrendPeriod(str, Enum):
    """Window for trend series."""

    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    YEAR = "year"

    def __str__(self) -> str:
        return self.value
