"""HTTP handlers for time entries."""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.dto import CreateTimeEntryRequest, ValidateTimeEntryRequest
from itsm_api.entities import CallerScope
from itsm_api.protocols import TimeEntryService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult

ENTRY_NOT_FOUND = "Entrée de temps introuvable"


class TimeEntryHandler(ResourceHandler):
    """HTTP handlers for /time-entries.

    Time is always logged for the authenticated caller; the body carries
    no user id.
    """

    def __init__(self, time_entry_service: TimeEntryService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._entries = time_entry_service

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        request = bind_json(CreateTimeEntryRequest, body)
        user_id = self._guard.require_user_id(caller)

        entry = await self._apply(self._entries.create(request, user_id))
        return HandlerResult.created(entry, "Entrée de temps créée avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        entry_id = path_id(params)

        entry = await self._lookup(self._entries.get_by_id(entry_id), ENTRY_NOT_FOUND)
        return HandlerResult.ok(entry, "Entrée de temps récupérée avec succès")

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        entries = await self._fetch(
            self._entries.get_all(),
            "Erreur lors de la récupération des entrées de temps",
        )
        return HandlerResult.ok(entries, "Entrées de temps récupérées avec succès")

    async def validate(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        entry_id = path_id(params)
        request = bind_json(ValidateTimeEntryRequest, body)
        user_id = self._guard.require_user_id(caller)

        entry = await self._apply(self._entries.validate(entry_id, request, user_id))
        return HandlerResult.ok(entry, "Entrée de temps validée avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        entry_id = path_id(params)

        await self._lookup(self._entries.delete(entry_id), ENTRY_NOT_FOUND)
        return HandlerResult.ok(None, "Entrée de temps supprimée avec succès")
