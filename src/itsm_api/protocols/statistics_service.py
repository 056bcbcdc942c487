"""Statistics service protocol.

Aggregations are computed by the service; the caller scope is forwarded so
the service can restrict them to what the caller may see.
"""

from typing import Protocol, runtime_checkable

from itsm_api.dto import (
    KPIStatisticsDTO,
    PerformanceStatisticsDTO,
    StatisticsOverviewDTO,
    TrendsStatisticsDTO,
    WorkloadStatisticsDTO,
)
from itsm_api.entities import CallerScope


@runtime_checkable
class StatisticsService(Protocol):
    """Protocol for read-only statistics."""

    async def get_overview(self, caller: CallerScope, period: str) -> StatisticsOverviewDTO: ...

    async def get_workload(
        self,
        caller: CallerScope,
        period: str,
        user_id: int | None,
    ) -> WorkloadStatisticsDTO: ...

    async def get_performance(self, caller: CallerScope, period: str) -> PerformanceStatisticsDTO: ...

    async def get_trends(self, caller: CallerScope, metric: str, period: str) -> TrendsStatisticsDTO:
        """Return the trend of ``metric`` (tickets, resolution_time, sla_compliance...)."""
        ...

    async def get_kpi(self, caller: CallerScope, period: str) -> KPIStatisticsDTO: ...
