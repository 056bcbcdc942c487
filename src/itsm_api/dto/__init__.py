"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request validation and response serialization.

Internal access logic should use entities from the entities package.
"""

from .envelope import Envelope
from .requests import (
    CreateFilialeRequest,
    CreateKnowledgeCategoryRequest,
    CreateRequestSourceRequest,
    CreateServiceRequestRequest,
    CreateServiceRequestTypeRequest,
    CreateTimeEntryRequest,
    RequestDTO,
    UpdateFilialeRequest,
    UpdateKnowledgeCategoryRequest,
    UpdateRequestSourceRequest,
    UpdateServiceRequestRequest,
    UpdateServiceRequestTypeRequest,
    ValidateServiceRequestRequest,
    ValidateTimeEntryRequest,
)
from .responses import (
    FilialeDTO,
    KnowledgeCategoryDTO,
    KPIStatisticsDTO,
    PerformanceStatisticsDTO,
    PermissionDTO,
    RequestSourceDTO,
    ServiceRequestDTO,
    ServiceRequestTypeDTO,
    StatisticsOverviewDTO,
    TimeEntryDTO,
    TrendDataDTO,
    TrendsStatisticsDTO,
    WorkloadDayDTO,
    WorkloadStatisticsDTO,
)

__all__ = [
    "Envelope",
    "RequestDTO",
    "CreateFilialeRequest",
    "UpdateFilialeRequest",
    "CreateKnowledgeCategoryRequest",
    "UpdateKnowledgeCategoryRequest",
    "CreateRequestSourceRequest",
    "UpdateRequestSourceRequest",
    "CreateServiceRequestTypeRequest",
    "UpdateServiceRequestTypeRequest",
    "CreateServiceRequestRequest",
    "UpdateServiceRequestRequest",
    "ValidateServiceRequestRequest",
    "CreateTimeEntryRequest",
    "ValidateTimeEntryRequest",
    "FilialeDTO",
    "KnowledgeCategoryDTO",
    "RequestSourceDTO",
    "ServiceRequestTypeDTO",
    "ServiceRequestDTO",
    "PermissionDTO",
    "TimeEntryDTO",
    "StatisticsOverviewDTO",
    "WorkloadDayDTO",
    "WorkloadStatisticsDTO",
    "PerformanceStatisticsDTO",
    "TrendDataDTO",
    "TrendsStatisticsDTO",
    "KPIStatisticsDTO",
]
