"""Access guard: the authorization policies used by the handlers.

Policies:
    - require: simple gate, exactly one permission
    - require_any: disjunctive gate, any of several permissions
    - allows: boolean check used to branch a query (scope narrowing)
    - require_user_id: actor-of-record for mutating operations
"""

import logging

from itsm_api.entities import CallerScope
from itsm_api.errors import AuthenticationError, AuthorizationError
from itsm_api.protocols import Authorizer

from .authorizer import ScopeAuthorizer

logger = logging.getLogger(__name__)


class AccessGuard:
    """Apply permission policies through an injected authorizer.

    Example:
        ```python
        guard = AccessGuard()
        guard.require(caller, Permission.FILIALES_CREATE)
        user_id = guard.require_user_id(caller)
        ```
    """

    def __init__(self, authorizer: Authorizer | None = None) -> None:
        """Initialize the guard.

        Args:
            authorizer: Permission checker. Defaults to ScopeAuthorizer.
        """
        self._authorizer = authorizer or ScopeAuthorizer()

    def allows(self, caller: CallerScope | None, *permissions: str) -> bool:
        """Return True if the caller holds at least one of the permissions."""
        return any(self._authorizer.has_permission(caller, str(p)) for p in permissions)

    def require(self, caller: CallerScope | None, permission: str) -> None:
        """Simple gate.

        Raises:
            AuthorizationError: If the caller lacks the permission
        """
        if not self.allows(caller, permission):
            logger.info(
                "Permission denied",
                extra={"permission": str(permission), "user_id": _user_id(caller)},
            )
            raise AuthorizationError(f"Permission insuffisante: {permission}")

    def require_any(self, caller: CallerScope | None, *permissions: str, message: str) -> None:
        """Disjunctive gate.

        Raises:
            AuthorizationError: With ``message`` if the caller holds none of the permissions
        """
        if not self.allows(caller, *permissions):
            logger.info(
                "Permission denied",
                extra={
                    "permission": ",".join(str(p) for p in permissions),
                    "user_id": _user_id(caller),
                },
            )
            raise AuthorizationError(message)

    @staticmethod
    def require_user_id(caller: CallerScope | None) -> int:
        """Return the authenticated user id, the actor of record.

        Raises:
            AuthenticationError: If no identity is attached to the request
        """
        if caller is None or caller.user_id is None:
            raise AuthenticationError("Utilisateur non authentifié")
        return caller.user_id


def _user_id(caller: CallerScope | None) -> int | None:
    return caller.user_id if caller is not None else None
