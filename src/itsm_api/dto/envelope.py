"""Uniform JSON envelope returned by every endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """Response envelope.

    ``data`` is always serialized (null on failures and deletes); ``error``
    and ``details`` only appear on failures.
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")
    data: Any = Field(None, description="Payload (null when there is none)")
    error: str | None = Field(None, description="Error label on failures")
    details: Any = Field(None, description="Extra failure information (decoder message...)")

    @classmethod
    def ok(cls, data: Any, message: str) -> "Envelope":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, details: Any = None) -> "Envelope":
        return cls(success=False, message=message, error=message, details=details)

    def to_content(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict.

        Returns:
            Dict with success/message/data, plus error/details when set
        """
        content = self.model_dump(mode="json")
        for key in ("error", "details"):
            if content[key] is None:
                del content[key]
        return content
