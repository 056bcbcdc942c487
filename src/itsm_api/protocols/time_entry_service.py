"""Time entry service protocol."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import CreateTimeEntryRequest, TimeEntryDTO, ValidateTimeEntryRequest


@runtime_checkable
class TimeEntryService(Protocol):
    """Protocol for time entries logged against tickets."""

    async def create(self, request: CreateTimeEntryRequest, user_id: int) -> TimeEntryDTO:
        """Log time for ``user_id``, the authenticated caller."""
        ...

    async def get_by_id(self, entry_id: int) -> TimeEntryDTO: ...

    async def get_all(self) -> list[TimeEntryDTO]: ...

    async def validate(
        self,
        entry_id: int,
        request: ValidateTimeEntryRequest,
        validated_by: int,
    ) -> TimeEntryDTO: ...

    async def delete(self, entry_id: int) -> None: ...
