"""Request source service protocol."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import CreateRequestSourceRequest, RequestSourceDTO, UpdateRequestSourceRequest


@runtime_checkable
class RequestSourceService(Protocol):
    """Protocol for request source management (settings)."""

    async def get_all(self) -> list[RequestSourceDTO]: ...

    async def get_by_id(self, source_id: int) -> RequestSourceDTO: ...

    async def create(self, request: CreateRequestSourceRequest, created_by: int) -> RequestSourceDTO: ...

    async def update(
        self,
        source_id: int,
        request: UpdateRequestSourceRequest,
        updated_by: int,
    ) -> RequestSourceDTO: ...

    async def delete(self, source_id: int) -> None: ...
