"""ITSM API - HTTP handler layer of an IT service-management backend.

This package parses HTTP input, checks permissions against the caller
scope, delegates to injected services and renders a uniform envelope.

Layers:
    - protocols: Interface contracts (services, Authorizer, CallerResolver)
    - entities: Domain models (CallerScope, Permission, periods)
    - dto: Data transfer objects (API contracts) and the envelope
    - access: Default authorizer and the access guard policies
    - handlers: One handler per resource
    - api: FastAPI app factory, routes and error handlers

Usage:
    ```python
    from itsm_api import ServiceContainer, create_app

    container = ServiceContainer(filiales=..., caller_resolver=..., ...)
    app = create_app(container)
    ```
"""

from itsm_api.api import create_app
from itsm_api.container import ServiceContainer, build_handlers, load_container
from itsm_api.entities import CallerScope, Permission
from itsm_api.errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    # Application
    "create_app",
    "ServiceContainer",
    "build_handlers",
    "load_container",
    # Entities
    "CallerScope",
    "Permission",
    # Errors
    "ApiError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "DomainError",
    "InternalError",
]
