"""HTTP handlers for request sources (settings)."""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.dto import CreateRequestSourceRequest, UpdateRequestSourceRequest
from itsm_api.entities import CallerScope
from itsm_api.protocols import RequestSourceService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult


class RequestSourceHandler(ResourceHandler):
    """HTTP handlers for /settings/sources.

    Unlike the other catalogs, a rejected delete keeps the service message
    (a source still referenced by tickets cannot be removed).
    """

    def __init__(self, source_service: RequestSourceService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._sources = source_service

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        sources = await self._fetch(
            self._sources.get_all(),
            "Erreur lors de la récupération des sources",
        )
        return HandlerResult.ok(sources, "Sources récupérées avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        source_id = path_id(params)

        source = await self._lookup(self._sources.get_by_id(source_id), "Source introuvable")
        return HandlerResult.ok(source, "Source récupérée avec succès")

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        request = bind_json(CreateRequestSourceRequest, body)
        user_id = self._guard.require_user_id(caller)

        source = await self._apply(self._sources.create(request, user_id))
        return HandlerResult.created(source, "Source créée avec succès")

    async def update(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        source_id = path_id(params)
        request = bind_json(UpdateRequestSourceRequest, body)
        user_id = self._guard.require_user_id(caller)

        source = await self._apply(self._sources.update(source_id, request, user_id))
        return HandlerResult.ok(source, "Source mise à jour avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        source_id = path_id(params)

        await self._apply(self._sources.delete(source_id))
        return HandlerResult.ok(None, "Source supprimée avec succès")
