"""Service request and service-request type protocols."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import (
    CreateServiceRequestRequest,
    CreateServiceRequestTypeRequest,
    ServiceRequestDTO,
    ServiceRequestTypeDTO,
    UpdateServiceRequestRequest,
    UpdateServiceRequestTypeRequest,
    ValidateServiceRequestRequest,
)


@runtime_checkable
class ServiceRequestService(Protocol):
    """Protocol for service requests."""

    async def create(self, request: CreateServiceRequestRequest, created_by: int) -> ServiceRequestDTO: ...

    async def get_by_id(self, request_id: int) -> ServiceRequestDTO: ...

    async def get_all(self) -> list[ServiceRequestDTO]: ...

    async def validate(
        self,
        request_id: int,
        request: ValidateServiceRequestRequest,
        validated_by: int,
    ) -> ServiceRequestDTO:
        """Validate or reject a service request, recording the validator."""
        ...

    async def update(
        self,
        request_id: int,
        request: UpdateServiceRequestRequest,
        updated_by: int,
    ) -> ServiceRequestDTO: ...

    async def delete(self, request_id: int) -> None: ...


@runtime_checkable
class ServiceRequestTypeService(Protocol):
    """Protocol for configurable service-request types."""

    async def get_all(self) -> list[ServiceRequestTypeDTO]: ...

    async def get_by_id(self, type_id: int) -> ServiceRequestTypeDTO: ...

    async def create(
        self,
        request: CreateServiceRequestTypeRequest,
        created_by: int,
    ) -> ServiceRequestTypeDTO: ...

    async def update(
        self,
        type_id: int,
        request: UpdateServiceRequestTypeRequest,
        updated_by: int,
    ) -> ServiceRequestTypeDTO: ...

    async def delete(self, type_id: int) -> None: ...
