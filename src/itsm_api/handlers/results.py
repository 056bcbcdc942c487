"""Handler results: status code + envelope."""

from dataclasses import dataclass
from typing import Any

from fastapi import status

from itsm_api.dto import Envelope


@dataclass(frozen=True)
class HandlerResult:
    """What a handler returns on success."""

    status_code: int
    envelope: Envelope

    @classmethod
    def ok(cls, data: Any, message: str) -> "HandlerResult":
        return cls(status.HTTP_200_OK, Envelope.ok(data, message))

    @classmethod
    def created(cls, data: Any, message: str) -> "HandlerResult":
        return cls(status.HTTP_201_CREATED, Envelope.ok(data, message))
