"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing handler instances.

Pattern:
    - Handlers and caller resolver stored in app.state by create_app
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from itsm_api.container import Handlers
from itsm_api.entities import CallerScope
from itsm_api.errors import AuthenticationError
from itsm_api.protocols import CallerResolver


def get_handlers(request: Request) -> Handlers:
    """Dependency injection for the resource handlers from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The Handlers bundle from app.state

    Raises:
        RuntimeError: If handlers are not initialized
    """
    handlers = getattr(request.app.state, "handlers", None)
    if handlers is None:
        raise RuntimeError("Handlers not initialized. Check create_app setup.")
    return handlers


def get_caller_resolver(request: Request) -> CallerResolver:
    """Dependency injection for the CallerResolver from app.state."""
    resolver = getattr(request.app.state, "caller_resolver", None)
    if resolver is None:
        raise RuntimeError("CallerResolver not initialized. Check create_app setup.")
    return resolver


async def get_caller(
    resolver: Annotated[CallerResolver, Depends(get_caller_resolver)],
    authorization: Annotated[str | None, Header()] = None,
) -> CallerScope:
    """Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationError: If the header is missing, malformed, or the
            token does not resolve to a caller
    """
    if not authorization:
        raise AuthenticationError("Token d'authentification manquant")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise AuthenticationError("Format de token invalide. Attendu: Bearer <token>")

    caller = await resolver.resolve(parts[1])
    if caller is None:
        raise AuthenticationError("Token invalide ou expiré")
    return caller


# Type aliases for cleaner dependency injection
HandlersDep = Annotated[Handlers, Depends(get_handlers)]
CallerDep = Annotated[CallerScope, Depends(get_caller)]
