"""Default authorizer backed by the caller scope."""

from itsm_api.entities import CallerScope


class ScopeAuthorizer:
    """Authorizer that reads the permission set carried by the caller scope.

    A missing scope never grants anything.
    """

    def has_permission(self, caller: CallerScope | None, permission: str) -> bool:
        if caller is None:
            return False
        return caller.has_permission(permission)
