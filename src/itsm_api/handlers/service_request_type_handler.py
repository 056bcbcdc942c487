"""HTTP handlers for service-request types."""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.dto import CreateServiceRequestTypeRequest, UpdateServiceRequestTypeRequest
from itsm_api.entities import CallerScope
from itsm_api.protocols import ServiceRequestTypeService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult

TYPE_NOT_FOUND = "Type introuvable"


class ServiceRequestTypeHandler(ResourceHandler):
    """HTTP handlers for /service-requests/types.

    Also served under the singular /service-requests/type/{id} path kept
    for older clients.
    """

    def __init__(self, type_service: ServiceRequestTypeService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._types = type_service

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        types = await self._fetch(
            self._types.get_all(),
            "Erreur lors de la récupération des types",
        )
        return HandlerResult.ok(types, "Types récupérés avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        type_id = path_id(params)

        request_type = await self._lookup(self._types.get_by_id(type_id), TYPE_NOT_FOUND)
        return HandlerResult.ok(request_type, "Type récupéré avec succès")

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        request = bind_json(CreateServiceRequestTypeRequest, body)
        user_id = self._guard.require_user_id(caller)

        request_type = await self._apply(self._types.create(request, user_id))
        return HandlerResult.created(request_type, "Type créé avec succès")

    async def update(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        type_id = path_id(params)
        request = bind_json(UpdateServiceRequestTypeRequest, body)
        user_id = self._guard.require_user_id(caller)

        request_type = await self._apply(self._types.update(type_id, request, user_id))
        return HandlerResult.ok(request_type, "Type mis à jour avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        type_id = path_id(params)

        await self._lookup(self._types.delete(type_id), TYPE_NOT_FOUND)
        return HandlerResult.ok(None, "Type supprimé avec succès")
