"""HTTP handlers for knowledge-base categories."""

from collections.abc import Mapping

from itsm_api.access import AccessGuard
from itsm_api.dto import CreateKnowledgeCategoryRequest, UpdateKnowledgeCategoryRequest
from itsm_api.entities import CallerScope
from itsm_api.protocols import KnowledgeCategoryService

from .base import ResourceHandler
from .binding import bind_json, path_id
from .results import HandlerResult

CATEGORY_NOT_FOUND = "Catégorie introuvable"


class KnowledgeCategoryHandler(ResourceHandler):
    """HTTP handlers for /knowledge-base/categories.

    Mutations record the authenticated caller as actor; a failed delete
    is reported as a missing category.
    """

    def __init__(self, category_service: KnowledgeCategoryService, guard: AccessGuard) -> None:
        super().__init__(guard)
        self._categories = category_service

    async def get_all(self, caller: CallerScope) -> HandlerResult:
        categories = await self._fetch(
            self._categories.get_all(),
            "Erreur lors de la récupération des catégories",
        )
        return HandlerResult.ok(categories, "Catégories récupérées avec succès")

    async def get_by_id(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        category_id = path_id(params)

        category = await self._lookup(self._categories.get_by_id(category_id), CATEGORY_NOT_FOUND)
        return HandlerResult.ok(category, "Catégorie récupérée avec succès")

    async def create(self, caller: CallerScope, body: bytes) -> HandlerResult:
        request = bind_json(CreateKnowledgeCategoryRequest, body)
        user_id = self._guard.require_user_id(caller)

        category = await self._apply(self._categories.create(request, user_id))
        return HandlerResult.created(category, "Catégorie créée avec succès")

    async def update(
        self,
        caller: CallerScope,
        params: Mapping[str, str],
        body: bytes,
    ) -> HandlerResult:
        category_id = path_id(params)
        request = bind_json(UpdateKnowledgeCategoryRequest, body)
        user_id = self._guard.require_user_id(caller)

        category = await self._apply(self._categories.update(category_id, request, user_id))
        return HandlerResult.ok(category, "Catégorie mise à jour avec succès")

    async def delete(self, caller: CallerScope, params: Mapping[str, str]) -> HandlerResult:
        category_id = path_id(params)

        await self._lookup(self._categories.delete(category_id), CATEGORY_NOT_FOUND)
        return HandlerResult.ok(None, "Catégorie supprimée avec succès")
