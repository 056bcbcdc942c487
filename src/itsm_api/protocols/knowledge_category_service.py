"""Knowledge-base category service protocol."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import (
    CreateKnowledgeCategoryRequest,
    KnowledgeCategoryDTO,
    UpdateKnowledgeCategoryRequest,
)


@runtime_checkable
class KnowledgeCategoryService(Protocol):
    """Protocol for knowledge-base category management."""

    async def get_all(self) -> list[KnowledgeCategoryDTO]: ...

    async def get_by_id(self, category_id: int) -> KnowledgeCategoryDTO: ...

    async def create(
        self,
        request: CreateKnowledgeCategoryRequest,
        created_by: int,
    ) -> KnowledgeCategoryDTO: ...

    async def update(
        self,
        category_id: int,
        request: UpdateKnowledgeCategoryRequest,
        updated_by: int,
    ) -> KnowledgeCategoryDTO: ...

    async def delete(self, category_id: int) -> None: ...
