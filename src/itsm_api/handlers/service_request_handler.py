"""HTTP handlers for service requests.

Besides CRUD and validation, two read-only views are derived from the
service request itself: the remaining processing time before its deadline
and its validation status.
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from itsm_api.access import AccessGuard
from itsm_api.dto import (
    CreateServiceRequestRequest,
    UpdateServiceRequestRequest,
    ValidateServiceRequestRequest,
)
from itsm_api.entities import CallerScope
from itsm_api.protocols import ServiceRequestService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult

REQUEST_NOT_FOUND = "Demande de service introuvable"

_SECONDS_PER_DAY = 24 * 60 * 60


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def deadline_view(deadline: datetime | None, now: datetime) -> dict[str, Any]:
    """Describe the time left before a deadline.

    ``remaining`` counts whole days, truncated toward zero, so a deadline
    passed by less than a day still reports 0 (urgent).

    Args:
        deadline: The service request deadline, if any
        now: Current time. Naive and aware values are reconciled with the
            deadline by assuming naive values are local time.

    Returns:
        ``{"deadline", "remaining", "unit"}`` plus ``"status"`` (overdue,
        urgent or on_time) when a deadline is set
    """
    view: dict[str, Any] = {"deadline": deadline, "remaining": None, "unit": "days"}
    if deadline is None:
        return view

    if deadline.tzinfo is None and now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    elif deadline.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone()

    remaining = int((deadline - now).total_seconds() / _SECONDS_PER_DAY)
    view["remaining"] = remaining
    if remaining < 0:
        view["status"] = "overdue"
    elif remaining <= 1:
        view["status"] = "urgent"
    else:
        view["status"] = "on_time"
    return view


class ServiceRequestHandler(ResourceHandler):
    """HTTP handlers for /service-requests.

    Example:
        ```python
        handler = ServiceRequestHandler(service, AccessGuard(), clock=lambda: fixed_now)
        result = await handler.get_deadline(caller, {"id": "12"})
        result.envelope.data["status"]  # "urgent"
        ```
    """

    def __init__(
        self,
        service_request_service: ServiceRequestService,
        guard: AccessGuard,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the service request handler.

        Args:
            service_request_service: The service request service (required).
            guard: Access guard resolving the actor of record.
            clock: Returns the current time. Defaults to UTC now.
        """
        super().__init__(guard)
        self._requests = service_request_service
        self._clock = clock or _utcnow

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        request = bind_json(CreateServiceRequestRequest, body)
        user_id = self._guard.require_user_id(caller)

        service_request = await self._apply(self._requests.create(request, user_id))
        return HandlerResult.created(service_request, "Demande de service créée avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        request_id = path_id(params)

        service_request = await self._lookup(self._requests.get_by_id(request_id), REQUEST_NOT_FOUND)
        return HandlerResult.ok(service_request, "Demande de service récupérée avec succès")

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        service_requests = await self._fetch(
            self._requests.get_all(),
            "Erreur lors de la récupération des demandes de service",
        )
        return HandlerResult.ok(service_requests, "Demandes de service récupérées avec succès")

    async def validate(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        """Handle POST /service-requests/{id}/validate requests.

        The authenticated caller is recorded as validator.
        """
        request_id = path_id(params)
        request = bind_json(ValidateServiceRequestRequest, body)
        user_id = self._guard.require_user_id(caller)

        service_request = await self._apply(self._requests.validate(request_id, request, user_id))
        return HandlerResult.ok(service_request, "Demande de service validée avec succès")

    async def update(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        request_id = path_id(params)
        request = bind_json(UpdateServiceRequestRequest, body)
        user_id = self._guard.require_user_id(caller)

        service_request = await self._apply(self._requests.update(request_id, request, user_id))
        return HandlerResult.ok(service_request, "Demande de service mise à jour avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        request_id = path_id(params)

        await self._lookup(self._requests.delete(request_id), REQUEST_NOT_FOUND)
        return HandlerResult.ok(None, "Demande de service supprimée avec succès")

    async def get_deadline(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        """Handle GET /service-requests/{id}/deadline requests."""
        request_id = path_id(params)

        service_request = await self._lookup(self._requests.get_by_id(request_id), REQUEST_NOT_FOUND)
        view = deadline_view(service_request.deadline, self._clock())
        return HandlerResult.ok(view, "Délai récupéré avec succès")

    async def get_validation_status(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
    ) -> HandlerResult:
        """Handle GET /service-requests/{id}/validation-status requests."""
        request_id = path_id(params)

        service_request = await self._lookup(self._requests.get_by_id(request_id), REQUEST_NOT_FOUND)
        status = {
            "validated": service_request.validated,
            "validator": service_request.validated_by,
            "date": service_request.validated_at,
            "comment": service_request.validation_comment,
        }
        return HandlerResult.ok(status, "Statut de validation récupéré avec succès")
