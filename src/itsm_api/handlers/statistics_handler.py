"""HTTP handlers for read-only statistics.

Every endpoint takes an optional ``period`` query parameter and forwards
the caller scope to the service, which restricts the aggregation to what
the caller may see.
"""

from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from itsm_api.access import AccessGuard
from itsm_api.entities import CallerScope, StatisticsPeriod, TrendPeriod
from itsm_api.errors import ValidationError
from itsm_api.protocols import StatisticsService

from .base import ResourceHandler
from .binding import parse_id
from .results import HandlerResult

PeriodT = TypeVar("PeriodT", bound=Enum)


def parse_period(query: Mapping[str, str], period_type: type[PeriodT], default: PeriodT) -> PeriodT:
    """Read the ``period`` query parameter.

    Raises:
        ValidationError: If the value is not one of ``period_type``
    """
    value = query.get("period")
    if not value:
        return default
    try:
        return period_type(value)
    except ValueError as e:
        raise ValidationError("Paramètre 'period' invalide", details=value) from e


class StatisticsHandler(ResourceHandler):
    """HTTP handlers for /stats."""

    def __init__(self, statistics_service: StatisticsService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._statistics = statistics_service

    async def get_overview(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        period = parse_period(query, StatisticsPeriod, StatisticsPeriod.MONTH)

        overview = await self._fetch(
            self._statistics.get_overview(caller, period.value),
            "Erreur lors de la récupération des statistiques",
        )
        return HandlerResult.ok(overview, "Statistiques récupérées avec succès")

    async def get_workload(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        """Handle GET /stats/workload requests.

        ``userId`` narrows the workload to one user. A value that is not a
        valid identifier is ignored rather than rejected.
        """
        period = parse_period(query, StatisticsPeriod, StatisticsPeriod.MONTH)
        user_id = None
        if query.get("userId"):
            try:
                user_id = parse_id(query["userId"])
            except ValidationError:
                user_id = None

        workload = await self._fetch(
            self._statistics.get_workload(caller, period.value, user_id),
            "Erreur lors de la récupération de la charge de travail",
        )
        return HandlerResult.ok(workload, "Statistiques de charge de travail récupérées avec succès")

    async def get_performance(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        period = parse_period(query, StatisticsPeriod, StatisticsPeriod.MONTH)

        performance = await self._fetch(
            self._statistics.get_performance(caller, period.value),
            "Erreur lors de la récupération des statistiques de performance",
        )
        return HandlerResult.ok(performance, "Statistiques de performance récupérées avec succès")

    async def get_trends(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        """Handle GET /stats/trends requests.

        ``metric`` is required: it is the only query parameter whose absence
        is an error.
        """
        metric = query.get("metric")
        if not metric:
            raise ValidationError("Paramètre 'metric' manquant")
        period = parse_period(query, TrendPeriod, TrendPeriod.THREE_MONTHS)

        trends = await self._fetch(
            self._statistics.get_trends(caller, metric, period.value),
            "Erreur lors de la récupération des tendances",
        )
        return HandlerResult.ok(trends, "Tendances récupérées avec succès")

    async def get_kpi(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        period = parse_period(query, StatisticsPeriod, StatisticsPeriod.MONTH)

        kpi = await self._fetch(
            self._statistics.get_kpi(caller, period.value),
            "Erreur lors de la récupération des KPI",
        )
        return HandlerResult.ok(kpi, "KPI récupérés avec succès")
