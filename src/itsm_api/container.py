"""Composition root: collaborators in, handlers out.

The service implementations live outside this package. A deployment
provides them through a factory named by the SERVICE_CONTAINER setting
(``package.module.factory``), which returns a ServiceContainer.
"""

from collections.abc import Callable
from dataclasses import dataclass
from importlib import import_module

from itsm_api.access import AccessGuard
from itsm_api.handlers import (
    FilialeHandler,
    KnowledgeCategoryHandler,
    PermissionHandler,
    RequestSourceHandler,
    ServiceRequestHandler,
    ServiceRequestTypeHandler,
    StatisticsHandler,
    TimeEntryHandler,
)
from itsm_api.protocols import (
    Authorizer,
    CallerResolver,
    FilialeService,
    KnowledgeCategoryService,
    PermissionService,
    RequestSourceService,
    ServiceRequestService,
    ServiceRequestTypeService,
    StatisticsService,
    TimeEntryService,
)


@dataclass(frozen=True)
class ServiceContainer:
    """Everything the handler layer needs from the outside world."""

    filiales: FilialeService
    knowledge_categories: KnowledgeCategoryService
    request_sources: RequestSourceService
    service_requests: ServiceRequestService
    service_request_types: ServiceRequestTypeService
    permissions: PermissionService
    statistics: StatisticsService
    time_entries: TimeEntryService
    caller_resolver: CallerResolver
    authorizer: Authorizer | None = None


@dataclass(frozen=True)
class Handlers:
    """One handler per resource, sharing a single access guard."""

    filiales: FilialeHandler
    knowledge_categories: KnowledgeCategoryHandler
    request_sources: RequestSourceHandler
    service_requests: ServiceRequestHandler
    service_request_types: ServiceRequestTypeHandler
    permissions: PermissionHandler
    statistics: StatisticsHandler
    time_entries: TimeEntryHandler


def build_handlers(container: ServiceContainer) -> Handlers:
    """Wire every handler to its service.

    Args:
        container: The collaborators

    Returns:
        The handlers, all using the container's authorizer
    """
    guard = AccessGuard(container.authorizer)
    return Handlers(
        filiales=FilialeHandler(container.filiales, guard),
        knowledge_categories=KnowledgeCategoryHandler(container.knowledge_categories, guard),
        request_sources=RequestSourceHandler(container.request_sources, guard),
        service_requests=ServiceRequestHandler(container.service_requests, guard),
        service_request_types=ServiceRequestTypeHandler(container.service_request_types, guard),
        permissions=PermissionHandler(container.permissions, guard),
        statistics=StatisticsHandler(container.statistics, guard),
        time_entries=TimeEntryHandler(container.time_entries, guard),
    )


def load_container(dotted_path: str) -> ServiceContainer:
    """Import and call the container factory named by ``dotted_path``.

    Args:
        dotted_path: "package.module.factory"

    Returns:
        The container built by the factory

    Raises:
        ValueError: If the path is malformed or the attribute is not callable
        TypeError: If the factory does not return a ServiceContainer
        ModuleNotFoundError / AttributeError: If the factory cannot be found
    """
    if not dotted_path or "." not in dotted_path:
        raise ValueError("dotted_path must be 'module.factory'")
    module_name, attr_name = dotted_path.rsplit(".", 1)
    if not module_name or not attr_name:
        raise ValueError(f"Invalid dotted path: {dotted_path!r}")

    factory: Callable[[], ServiceContainer] = getattr(import_module(module_name), attr_name)
    if not callable(factory):
        raise ValueError(f"{dotted_path!r} is not callable")

    container = factory()
    if not isinstance(container, ServiceContainer):
        raise TypeError(f"{dotted_path!r} returned {type(container).__name__}, expected ServiceContainer")
    return container
