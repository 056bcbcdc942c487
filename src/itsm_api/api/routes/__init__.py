"""API routers, one per resource."""

from .filiales import router as filiales_router
from .knowledge_categories import router as knowledge_categories_router
from .permissions import router as permissions_router
from .request_sources import router as request_sources_router
from .service_requests import router as service_requests_router
from .statistics import router as statistics_router
from .time_entries import router as time_entries_router

routers = [
    filiales_router,
    knowledge_categories_router,
    request_sources_router,
    service_requests_router,
    permissions_router,
    statistics_router,
    time_entries_router,
]

__all__ = ["routers"]
