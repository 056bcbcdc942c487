"""HTTP handlers for the permission catalog."""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.entities import CallerScope
from itsm_api.protocols import PermissionService

from .base import ResourceHandler
from .results import HandlerResult


class PermissionHandler(ResourceHandler):
    """HTTP handlers for /permissions (read-only)."""

    def __init__(self, permission_service: PermissionService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._permissions = permission_service

    async def get_all(self, caller: CallerScope, query: Mapping[str, str]) -> HandlerResult:
        """Handle GET /permissions requests.

        A non-empty ``module`` query parameter restricts the list to that
        module.
        """
        module = query.get("module")
        if module:
            call = self._permissions.get_by_module(module)
        else:
            call = self._permissions.get_all()

        permissions = await self._fetch(call, "Erreur lors de la récupération des permissions")
        return HandlerResult.ok(permissions, "Permissions récupérées avec succès")

    async def get_by_code(self, caller: CallerScope, code: str) -> HandlerResult:
        permission = await self._lookup(self._permissions.get_by_code(code), "Permission introuvable")
        return HandlerResult.ok(permission, "Permission récupérée avec succès")
