"""Caller scope domain entity."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CallerScope:
    """Request-lifetime context describing who is calling.

    Built by the caller resolver once per request and passed explicitly to
    every handler.

    Attributes:
        user_id: Authenticated user id (None when the identity is unknown)
        filiale_id: Branch restriction for scoped roles (None = no branch)
        department_id: Department of the caller, if any
        role: Role name (e.g. "DSI", "TECHNICIEN_IT")
        permissions: Permission codes granted to the caller
    """

    user_id: int | None
    filiale_id: int | None = None
    department_id: int | None = None
    role: str | None = None
    permissions: frozenset[str] = field(default_factory=frozenset)

    def has_permission(self, permission: str) -> bool:
        return str(permission) in self.permissions

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return any(self.has_permission(p) for p in permissions)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return all(self.has_permission(p) for p in permissions)
