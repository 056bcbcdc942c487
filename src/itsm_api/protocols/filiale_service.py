"""Filiale service protocol."""

from typing import Protocol, runtime_checkable

from itsm_api.dto import CreateFilialeRequest, FilialeDTO, UpdateFilialeRequest


@runtime_checkable
class FilialeService(Protocol):
    """Protocol for filiale (branch) management.

    Every method raises on failure; the handler decides which status the
    failure maps to.
    """

    async def create(self, request: CreateFilialeRequest) -> FilialeDTO:
        """Create a filiale. Raises if the code is already used."""
        ...

    async def get_all(self) -> list[FilialeDTO]:
        """Return every filiale."""
        ...

    async def get_active(self) -> list[FilialeDTO]:
        """Return active filiales only."""
        ...

    async def get_by_id(self, filiale_id: int) -> FilialeDTO:
        """Return one filiale. Raises if it does not exist."""
        ...

    async def get_by_code(self, code: str) -> FilialeDTO:
        """Return the filiale with this code. Raises if it does not exist."""
        ...

    async def get_software_provider(self) -> FilialeDTO:
        """Return the filiale flagged as software provider. Raises if none."""
        ...

    async def update(self, filiale_id: int, request: UpdateFilialeRequest) -> FilialeDTO:
        """Update a filiale."""
        ...

    async def delete(self, filiale_id: int) -> None:
        """Delete a filiale."""
        ...
