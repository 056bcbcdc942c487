"""
Shared fixtures: in-memory services recording their calls, and a static
token -> caller resolver.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from itsm_api import CallerScope, Permission, ServiceContainer, create_app
from itsm_api.config import Settings
from itsm_api.dto import (
    FilialeDTO,
    KnowledgeCategoryDTO,
    KPIStatisticsDTO,
    PerformanceStatisticsDTO,
    PermissionDTO,
    RequestSourceDTO,
    ServiceRequestDTO,
    ServiceRequestTypeDTO,
    StatisticsOverviewDTO,
    TimeEntryDTO,
    TrendsStatisticsDTO,
    WorkloadStatisticsDTO,
)

PREFIX = "/api/v1"

ALL_FILIALE_PERMISSIONS = frozenset(str(p) for p in Permission)

CALLERS = {
    "admin-token": CallerScope(user_id=1, filiale_id=1, role="ADMIN", permissions=ALL_FILIALE_PERMISSIONS),
    "viewer-token": CallerScope(
        user_id=2,
        filiale_id=7,
        role="TECHNICIEN_IT",
        permissions=frozenset({"filiales.view"}),
    ),
    "notifier-token": CallerScope(
        user_id=4,
        filiale_id=None,
        permissions=frozenset({"notifications.filter_by_filiale"}),
    ),
    "nobody-token": CallerScope(user_id=3, filiale_id=9),
    "no-identity-token": CallerScope(user_id=None),
}


def auth(token: str) -> dict[str, str]:
    """Authorization header for a token of CALLERS."""
    return {"Authorization": f"Bearer {token}"}


class StaticCallerResolver:
    """Resolve tokens from a fixed table."""

    def __init__(self, callers: dict[str, CallerScope]):
        self.callers = callers
        self.tokens: list[str] = []

    async def resolve(self, token: str) -> CallerScope | None:
        self.tokens.append(token)
        return self.callers.get(token)


class RecordingService:
    """Base for fake services: records calls, raises configured errors."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.errors: dict[str, Exception] = {}

    def _call(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


class InMemoryService(RecordingService):
    """Fake CRUD service over a dict of DTOs."""

    not_found = "introuvable"

    def __init__(self, items):
        super().__init__()
        self.items = {item.id: item for item in items}

    def _get(self, item_id: int):
        if item_id not in self.items:
            raise LookupError(f"{item_id} {self.not_found}")
        return self.items[item_id]

    def _next_id(self) -> int:
        return max(self.items, default=0) + 1

    async def get_all(self):
        self._call("get_all")
        return list(self.items.values())

    async def get_by_id(self, item_id):
        self._call("get_by_id", item_id)
        return self._get(item_id)

    async def delete(self, item_id):
        self._call("delete", item_id)
        self._get(item_id)
        del self.items[item_id]


class FakeFilialeService(InMemoryService):
    async def create(self, request):
        self._call("create", request)
        if any(f.code == request.code for f in self.items.values()):
            raise ValueError("Une filiale avec ce code existe déjà")
        filiale = FilialeDTO(id=self._next_id(), **request.model_dump())
        self.items[filiale.id] = filiale
        return filiale

    async def get_active(self):
        self._call("get_active")
        return [f for f in self.items.values() if f.is_active]

    async def get_by_code(self, code):
        self._call("get_by_code", code)
        for filiale in self.items.values():
            if filiale.code == code:
                return filiale
        raise LookupError(code)

    async def get_software_provider(self):
        self._call("get_software_provider")
        for filiale in self.items.values():
            if filiale.is_software_provider:
                return filiale
        raise LookupError("no software provider")

    async def update(self, filiale_id, request):
        self._call("update", filiale_id, request)
        filiale = self._get(filiale_id)
        updated = filiale.model_copy(update=request.model_dump(exclude_none=True))
        self.items[filiale_id] = updated
        return updated

    async def delete(self, filiale_id):
        self._call("delete", filiale_id)
        if filiale_id not in self.items:
            raise ValueError("Filiale inexistante")
        del self.items[filiale_id]


class FakeCatalogService(InMemoryService):
    """Categories, sources and types: create/update with an actor."""

    def __init__(self, dto_type, items):
        super().__init__(items)
        self.dto_type = dto_type

    async def create(self, request, created_by):
        self._call("create", request, created_by)
        item = self.dto_type(id=self._next_id(), **request.model_dump())
        self.items[item.id] = item
        return item

    async def update(self, item_id, request, updated_by):
        self._call("update", item_id, request, updated_by)
        item = self._get(item_id).model_copy(update=request.model_dump(exclude_none=True))
        self.items[item_id] = item
        return item


class FakeRequestSourceService(FakeCatalogService):
    async def delete(self, item_id):
        self._call("delete", item_id)
        raise ValueError("Cette source est utilisée par des tickets")


class FakeServiceRequestService(InMemoryService):
    async def create(self, request, created_by):
        self._call("create", request, created_by)
        deadline = request.deadline
        item = ServiceRequestDTO(
            id=self._next_id(),
            ticket_id=request.ticket_id,
            type_id=request.type_id,
            deadline=datetime(deadline.year, deadline.month, deadline.day) if deadline else None,
        )
        self.items[item.id] = item
        return item

    async def validate(self, item_id, request, validated_by):
        self._call("validate", item_id, request, validated_by)
        item = self._get(item_id)
        if item.validated:
            raise ValueError("Demande déjà validée")
        item = item.model_copy(
            update={
                "validated": request.validated,
                "validated_by": validated_by,
                "validated_at": datetime(2026, 1, 2, 10, 0),
                "validation_comment": request.comment,
            }
        )
        self.items[item_id] = item
        return item

    async def update(self, item_id, request, updated_by):
        self._call("update", item_id, request, updated_by)
        item = self._get(item_id)
        if request.type_id is not None:
            item = item.model_copy(update={"type_id": request.type_id})
        self.items[item_id] = item
        return item


class FakePermissionService(InMemoryService):
    async def get_by_module(self, module):
        self._call("get_by_module", module)
        return [p for p in self.items.values() if p.module == module]

    async def get_by_code(self, code):
        self._call("get_by_code", code)
        for permission in self.items.values():
            if permission.code == code:
                return permission
        raise LookupError(code)


class FakeStatisticsService(RecordingService):
    async def get_overview(self, caller, period):
        self._call("get_overview", caller, period)
        return StatisticsOverviewDTO(period=period, tickets={"total": 12})

    async def get_workload(self, caller, period, user_id):
        self._call("get_workload", caller, period, user_id)
        return WorkloadStatisticsDTO(period=period, user_id=user_id, total_tickets=5)

    async def get_performance(self, caller, period):
        self._call("get_performance", caller, period)
        return PerformanceStatisticsDTO(period=period, sla_compliance=92.5)

    async def get_trends(self, caller, metric, period):
        self._call("get_trends", caller, metric, period)
        return TrendsStatisticsDTO(metric=metric, period=period, trend="stable")

    async def get_kpi(self, caller, period):
        self._call("get_kpi", caller, period)
        return KPIStatisticsDTO(period=period, tickets_registered=40)


class FakeTimeEntryService(InMemoryService):
    async def create(self, request, user_id):
        self._call("create", request, user_id)
        entry = TimeEntryDTO(
            id=self._next_id(),
            ticket_id=request.ticket_id,
            user_id=user_id,
            time_spent=request.time_spent,
            date=datetime(request.date.year, request.date.month, request.date.day),
            description=request.description,
        )
        self.items[entry.id] = entry
        return entry

    async def validate(self, entry_id, request, validated_by):
        self._call("validate", entry_id, request, validated_by)
        entry = self._get(entry_id).model_copy(
            update={"validated": request.validated, "validated_by": validated_by}
        )
        self.items[entry_id] = entry
        return entry


@pytest.fixture
def services():
    """Fresh fake services for each test."""
    in_ten_days = datetime.now(timezone.utc) + timedelta(days=10, hours=1)
    return SimpleNamespace(
        filiales=FakeFilialeService(
            [
                FilialeDTO(id=1, code="MCI", name="MCI Care CI", is_software_provider=True),
                FilialeDTO(id=7, code="MCI-SN", name="MCI Care Sénégal"),
                FilialeDTO(id=9, code="MCI-BF", name="MCI Care Burkina", is_active=False),
            ]
        ),
        knowledge_categories=FakeCatalogService(
            KnowledgeCategoryDTO,
            [KnowledgeCategoryDTO(id=1, name="Réseau"), KnowledgeCategoryDTO(id=2, name="VPN", parent_id=1)],
        ),
        request_sources=FakeRequestSourceService(
            RequestSourceDTO,
            [RequestSourceDTO(id=1, name="Email", code="email")],
        ),
        service_request_types=FakeCatalogService(
            ServiceRequestTypeDTO,
            [ServiceRequestTypeDTO(id=1, name="Installation", default_deadline=48)],
        ),
        service_requests=FakeServiceRequestService(
            [
                ServiceRequestDTO(id=1, ticket_id=10, type_id=1, deadline=in_ten_days),
                ServiceRequestDTO(id=2, ticket_id=11, type_id=1),
            ]
        ),
        permissions=FakePermissionService(
            [
                PermissionDTO(id=1, name="Voir les filiales", code="filiales.view", module="filiales"),
                PermissionDTO(id=2, name="Créer un ticket", code="tickets.create", module="tickets"),
            ]
        ),
        statistics=FakeStatisticsService(),
        time_entries=FakeTimeEntryService(
            [TimeEntryDTO(id=1, ticket_id=10, user_id=2, time_spent=30, date=datetime(2026, 1, 5))]
        ),
        caller_resolver=StaticCallerResolver(CALLERS),
    )


@pytest.fixture
def settings():
    """Settings independent from the environment."""
    return Settings(
        api_prefix=PREFIX,
        allowed_origins="*",
        log_level="WARNING",
        log_format="text",
        service_container=None,
    )


@pytest.fixture
def client(services, settings):
    """Create a test client."""
    container = ServiceContainer(
        filiales=services.filiales,
        knowledge_categories=services.knowledge_categories,
        request_sources=services.request_sources,
        service_requests=services.service_requests,
        service_request_types=services.service_request_types,
        permissions=services.permissions,
        statistics=services.statistics,
        time_entries=services.time_entries,
        caller_resolver=services.caller_resolver,
    )
    return TestClient(create_app(container, settings))
