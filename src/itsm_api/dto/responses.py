"""Response DTOs for API endpoints.

Services return these models; handlers place them verbatim in the
envelope's ``data`` field.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class FilialeDTO(BaseModel):
    """A filiale (organizational branch)."""

    id: int
    code: str = Field(..., description="Unique filiale code")
    name: str
    country: str | None = None
    city: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    is_active: bool = True
    is_software_provider: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class KnowledgeCategoryDTO(BaseModel):
    """A knowledge-base article category."""

    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None


class RequestSourceDTO(BaseModel):
    """A channel through which requests arrive (phone, email, portal...)."""

    id: int
    name: str
    code: str
    description: str | None = None
    is_enabled: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ServiceRequestTypeDTO(BaseModel):
    """A configurable service-request type."""

    id: int
    name: str = Field(..., description="Type name (e.g. 'Installation')")
    description: str | None = None
    default_deadline: int = Field(..., description="Default deadline in hours")
    is_active: bool = True


class ServiceRequestDTO(BaseModel):
    """A service request attached to a ticket."""

    id: int
    ticket_id: int
    type_id: int
    type: ServiceRequestTypeDTO | None = None
    deadline: datetime | None = None
    validated: bool = False
    validated_by: int | None = None
    validated_at: datetime | None = None
    validation_comment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PermissionDTO(BaseModel):
    """A permission from the permission catalog."""

    id: int
    name: str
    code: str
    description: str | None = None
    module: str | None = None
    created_at: datetime | None = None


class TimeEntryDTO(BaseModel):
    """Time spent by a user on a ticket."""

    id: int
    ticket_id: int
    project_task_id: int | None = None
    user_id: int
    time_spent: int = Field(..., description="Time spent in minutes")
    date: datetime
    description: str | None = None
    validated: bool = False
    validated_by: int | None = None
    validated_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


class StatisticsOverviewDTO(BaseModel):
    """Overview of the system statistics for a period."""

    period: str
    tickets: dict[str, Any] = Field(default_factory=dict)
    sla: dict[str, Any] = Field(default_factory=dict)
    performance: dict[str, Any] = Field(default_factory=dict)
    users: dict[str, Any] = Field(default_factory=dict)


class WorkloadDayDTO(BaseModel):
    """Number of tickets handled on one day."""

    date: datetime
    count: int


class WorkloadStatisticsDTO(BaseModel):
    """Workload statistics, optionally for a single user."""

    period: str
    user_id: int | None = None
    total_tickets: int = 0
    average_per_day: float = 0.0
    peak_day: datetime | None = None
    peak_day_count: int = 0
    distribution: list[WorkloadDayDTO] = Field(default_factory=list)


class PerformanceStatisticsDTO(BaseModel):
    """Global performance statistics."""

    period: str
    average_resolution_time: float = Field(0.0, description="Minutes")
    sla_compliance: float = Field(0.0, description="Percentage")
    efficiency: float = Field(0.0, description="Percentage")
    productivity: float = Field(0.0, description="Percentage")
    first_response_time: float = Field(0.0, description="Minutes")


class TrendDataDTO(BaseModel):
    """One point of a trend series."""

    date: datetime
    value: float


class TrendsStatisticsDTO(BaseModel):
    """Trend of one metric over a period."""

    metric: str
    period: str
    trend: str = Field(..., description="increasing, decreasing or stable")
    data: list[TrendDataDTO] = Field(default_factory=list)
    forecast: list[TrendDataDTO] | None = None


class KPIStatisticsDTO(BaseModel):
    """Success indicators (KPI)."""

    period: str
    tickets_registered: int = 0
    utilization_rate: float = Field(0.0, description="Percentage")
    report_production: int = 0
    average_satisfaction: float = Field(0.0, description="Percentage")
    response_time: float = Field(0.0, description="Minutes")
    resolution_rate: float = Field(0.0, description="Percentage")
