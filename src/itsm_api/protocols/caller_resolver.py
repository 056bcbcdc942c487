"""Caller resolution port.

Token verification lives outside this package; the resolver turns a bearer
token into the caller scope the handlers work with.
"""

from typing import Protocol, runtime_checkable

from itsm_api.entities import CallerScope


@runtime_checkable
class CallerResolver(Protocol):
    """Protocol for turning a bearer token into a caller scope."""

    async def resolve(self, token: str) -> CallerScope | None:
        """Resolve the caller behind a token.

        Args:
            token: The raw bearer token (without the "Bearer " prefix)

        Returns:
            The caller scope, or None if the token is invalid, expired or
            belongs to an unknown / disabled user
        """
        ...
