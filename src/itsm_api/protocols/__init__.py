"""Protocol interfaces for the collaborators of the handler layer.

This package contains protocol definitions using structural typing.
Protocols enable:
- Injecting any service implementation (SQL, HTTP client, in-memory...)
- Unit testing handlers with fake services
- Clear separation between HTTP concerns and business rules

Usage:
    ```python
    from itsm_api.protocols import FilialeService

    service: FilialeService = SqlFilialeService(...)  # any matching class
    ```
"""

from .authorizer import Authorizer
from .caller_resolver import CallerResolver
from .filiale_service import FilialeService
from .knowledge_category_service import KnowledgeCategoryService
from .permission_service import PermissionService
from .request_source_service import RequestSourceService
from .service_request_service import ServiceRequestService, ServiceRequestTypeService
from .statistics_service import StatisticsService
from .time_entry_service import TimeEntryService

__all__ = [
    "Authorizer",
    "CallerResolver",
    "FilialeService",
    "KnowledgeCategoryService",
    "PermissionService",
    "RequestSourceService",
    "ServiceRequestService",
    "ServiceRequestTypeService",
    "StatisticsService",
    "TimeEntryService",
]
