"""Permission catalog service protocol."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import PermissionDTO


@runtime_checkable
class PermissionService(Protocol):
    """Protocol for reading the permission catalog."""

    async def get_all(self) -> list[PermissionDTO]: ...

    async def get_by_module(self, module: str) -> list[PermissionDTO]:
        """Return the permissions of one module (e.g. "tickets")."""
        ...

    async def get_by_code(self, code: str) -> PermissionDTO: ...
