"""Authorization port.

Decides whether a caller holds one permission code. The access guard
builds the gate policies (simple, disjunctive, scope-narrowing) on top of
this single question, so swapping the authorizer never changes a policy.
"""

from typing import Protocol, runtime_checkable

from itsm_api.entities import CallerScope


@runtime_checkable
class Authorizer(Protocol):
    """Protocol for permission checks.

    Example:
        ```python
        authorizer: Authorizer = ScopeAuthorizer()
        authorizer.has_permission(caller, "filiales.view")
        ```
    """

    def has_permission(self, caller: CallerScope | None, permission: str) -> bool:
        """Check one permission code.

        Args:
            caller: The caller scope (None when no caller was resolved)
            permission: The permission code (e.g. "filiales.create")

        Returns:
            True if the caller holds the permission, False otherwise
        """
        ...
