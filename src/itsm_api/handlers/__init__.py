"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on service ports, never on storage.

Architecture:
    Route -> Handler -> Service port
    (FastAPI) -> (parse, authorize, map) -> (business rules, injected)

A handler returns a HandlerResult on success and raises an ApiError on
failure; the API layer renders both into the response envelope.
"""

from .filiale_handler import FilialeHandler
from .knowledge_category_handler import KnowledgeCategoryHandler
from .permission_handler import PermissionHandler
from .request_source_handler import RequestSourceHandler
from .results import HandlerResult
from .service_request_handler import ServiceRequestHandler
from .service_request_type_handler import ServiceRequestTypeHandler
from .statistics_handler import StatisticsHandler
from .time_entry_handler import TimeEntryHandler

__all__ = [
    "FilialeHandler",
    "HandlerResult",
    "KnowledgeCategoryHandler",
    "PermissionHandler",
    "RequestSourceHandler",
    "ServiceRequestHandler",
    "ServiceRequestTypeHandler",
    "StatisticsHandler",
    "TimeEntryHandler",
]
