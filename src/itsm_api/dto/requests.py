"""Request DTOs for API endpoints.

Bodies are decoded with strict types: a string where a number is expected
is a decoding error, not a coercion. Unknown keys are ignored.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class RequestDTO(BaseModel):
    """Base class for request bodies."""

    model_config = ConfigDict(strict=True, extra="ignore")


# ---------------------------------------------------------------------------
# Filiales
# ---------------------------------------------------------------------------


class CreateFilialeRequest(RequestDTO):
    """Request DTO for creating a filiale."""

    code: str = Field(..., description="Unique filiale code", min_length=1)
    name: str = Field(..., description="Filiale name", min_length=1)
    country: str | None = None
    city: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    is_software_provider: bool = Field(
        False,
        description="Whether this filiale is the software / IT provider",
    )


class UpdateFilialeRequest(RequestDTO):
    """Request DTO for updating a filiale (every field optional)."""

    name: str | None = None
    country: str | None = None
    city: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    is_active: bool | None = None
    is_software_provider: bool | None = None


# ---------------------------------------------------------------------------
# Knowledge base categories
# ---------------------------------------------------------------------------


class CreateKnowledgeCategoryRequest(RequestDTO):
    """Request DTO for creating a knowledge-base category."""

    name: str = Field(..., min_length=1)
    description: str | None = None
    parent_id: int | None = Field(None, description="Parent category", ge=1)


class UpdateKnowledgeCategoryRequest(RequestDTO):
    """Request DTO for updating a knowledge-base category."""

    name: str | None = None
    description: str | None = None
    parent_id: int | None = Field(None, description="null detaches the parent", ge=1)


# ---------------------------------------------------------------------------
# Request sources
# ---------------------------------------------------------------------------


class CreateRequestSourceRequest(RequestDTO):
    """Request DTO for creating a request source (phone, email, portal...)."""

    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    description: str | None = None
    is_enabled: bool = False


class UpdateRequestSourceRequest(RequestDTO):
    """Request DTO for updating a request source."""

    name: str | None = None
    description: str | None = None
    is_enabled: bool | None = None


# ---------------------------------------------------------------------------
# Service requests and their types
# ---------------------------------------------------------------------------


class CreateServiceRequestTypeRequest(RequestDTO):
    """Request DTO for creating a service-request type."""

    name: str = Field(..., min_length=1)
    description: str | None = None
    default_deadline: int = Field(..., description="Default deadline in hours", ge=1)


class UpdateServiceRequestTypeRequest(RequestDTO):
    """Request DTO for updating a service-request type."""

    name: str | None = None
    description: str | None = None
    default_deadline: int | None = Field(None, ge=1)
    is_active: bool | None = None


class CreateServiceRequestRequest(RequestDTO):
    """Request DTO for creating a service request."""

    ticket_id: int = Field(..., gt=0)
    type_id: int = Field(..., gt=0)
    deadline: dt.date | None = Field(None, description="Deadline, format YYYY-MM-DD")


class UpdateServiceRequestRequest(RequestDTO):
    """Request DTO for updating a service request."""

    type_id: int | None = Field(None, gt=0)
    deadline: dt.date | None = None


class ValidateServiceRequestRequest(RequestDTO):
    """Request DTO for validating (or rejecting) a service request."""

    validated: bool = Field(..., description="true to validate, false to reject")
    comment: str | None = None


# ---------------------------------------------------------------------------
# Time entries
# ---------------------------------------------------------------------------


class CreateTimeEntryRequest(RequestDTO):
    """Request DTO for logging time spent on a ticket."""

    ticket_id: int = Field(..., gt=0)
    time_spent: int = Field(..., description="Time spent in minutes", gt=0)
    date: dt.date
    description: str | None = None


class ValidateTimeEntryRequest(RequestDTO):
    """Request DTO for validating a time entry."""

    validated: bool
