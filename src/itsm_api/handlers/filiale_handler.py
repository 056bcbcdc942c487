"""HTTP handlers for filiale (branch) operations.

Filiales are the only resource gated by permissions inside the handler,
including the scope-narrowing list.
"""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.dto import CreateFilialeRequest, UpdateFilialeRequest
from itsm_api.entities import CallerScope, Permission
from itsm_api.protocols import FilialeService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult

FILIALE_NOT_FOUND = "Filiale introuvable"


class FilialeHandler(ResourceHandler):
    """HTTP handlers for filiales.

    Permission policies:
    - create: filiales.create
    - list: filiales.view, filiales.view_all or notifications.filter_by_filiale;
      filiales.view_all / filiales.manage see every filiale, the others
      only their own
    - active list: public
    - read by id / code / software provider: filiales.view
    - update: filiales.update
    - delete: filiales.manage

    Example:
        ```python
        handler = FilialeHandler(filiale_service=service, guard=AccessGuard())

        @app.get("/filiales")
        async def list_filiales(caller: CallerDep):
            return render(await handler.get_all(caller))
        ```
    """

    def __init__(self, filiale_service: FilialeService, guard: AccessGuard) -> None:
        """Initialize the filiale handler.

        Args:
            filiale_service: The filiale service (required).
            guard: Access guard applying the permission policies.
        """
        super().__init__(guard)
        self._filiales = filiale_service

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        """Handle POST /filiales requests.

        Raises:
            AuthorizationError: Without filiales.create
            ValidationError: If the body does not decode
            DomainError: If the service rejects the filiale (duplicate code...)
        """
        self._guard.require(caller, Permission.FILIALES_CREATE)
        request = bind_json(CreateFilialeRequest, body)

        filiale = await self._apply(self._filiales.create(request))
        return HandlerResult.created(filiale, "Filiale créée avec succès")

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        """Handle GET /filiales requests.

        Elevated callers get the whole list through ``get_all``. Scoped
        callers get a list holding only their own filiale, fetched through
        ``get_by_id``, or an empty list when no filiale is attached to them.
        """
        self._guard.require_any(
            caller,
            Permission.FILIALES_VIEW,
            Permission.FILIALES_VIEW_ALL,
            Permission.NOTIFICATIONS_FILTER_BY_FILIALE,
            message=(
                "Permission insuffisante: filiales.view, filiales.view_all "
                "ou notifications.filter_by_filiale"
            ),
        )
        error_message = "Erreur lors de la récupération des filiales"

        if self._guard.allows(caller, Permission.FILIALES_VIEW_ALL, Permission.FILIALES_MANAGE):
            filiales = await self._fetch(self._filiales.get_all(), error_message)
        elif caller.filiale_id is not None:
            own = await self._fetch(self._filiales.get_by_id(caller.filiale_id), error_message)
            filiales = [own]
        else:
            filiales = []

        return HandlerResult.ok(filiales, "Filiales récupérées avec succès")

    async def get_active(self) -> HandlerResult:
        """Handle GET /filiales/active requests (public, used at registration)."""
        filiales = await self._fetch(
            self._filiales.get_active(),
            "Erreur lors de la récupération des filiales actives",
        )
        return HandlerResult.ok(filiales, "Filiales actives récupérées avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        """Handle GET /filiales/{filiale_id} requests.

        The identifier is read from ``filiale_id``, falling back to the
        legacy ``id`` parameter.
        """
        self._guard.require(caller, Permission.FILIALES_VIEW)
        filiale_id = path_id(params, "filiale_id", fallback="id")

        filiale = await self._lookup(self._filiales.get_by_id(filiale_id), FILIALE_NOT_FOUND)
        return HandlerResult.ok(filiale, "Filiale récupérée avec succès")

    async def get_by_code(self, caller: CallerScope, code: str) -> HandlerResult:
        """Handle GET /filiales/code/{code} requests."""
        self._guard.require(caller, Permission.FILIALES_VIEW)

        filiale = await self._lookup(self._filiales.get_by_code(code), FILIALE_NOT_FOUND)
        return HandlerResult.ok(filiale, "Filiale récupérée avec succès")

    async def get_software_provider(self, caller: CallerScope) -> HandlerResult:
        """Handle GET /filiales/software-provider requests."""
        self._guard.require(caller, Permission.FILIALES_VIEW)

        filiale = await self._lookup(
            self._filiales.get_software_provider(),
            "Filiale fournisseur de logiciels introuvable",
        )
        return HandlerResult.ok(filiale, "Filiale fournisseur de logiciels récupérée avec succès")

    async def update(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        """Handle PUT /filiales/{filiale_id} requests."""
        self._guard.require(caller, Permission.FILIALES_UPDATE)
        filiale_id = path_id(params, "filiale_id", fallback="id")
        request = bind_json(UpdateFilialeRequest, body)

        filiale = await self._apply(self._filiales.update(filiale_id, request))
        return HandlerResult.ok(filiale, "Filiale mise à jour avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        """Handle DELETE /filiales/{filiale_id} requests."""
        self._guard.require(caller, Permission.FILIALES_MANAGE)
        filiale_id = path_id(params, "filiale_id", fallback="id")

        await self._apply(self._filiales.delete(filiale_id))
        return HandlerResult.ok(None, "Filiale supprimée avec succès")
