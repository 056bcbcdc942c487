"""Error taxonomy for the HTTP handler layer.

Every failure a handler can produce is one of these exceptions. They are
raised by handlers (or passed through from services) and rendered into the
response envelope by the API error handlers, so a request is classified
exactly once.

Taxonomy:
    - ValidationError: malformed path/query parameter or JSON body (400)
    - AuthenticationError: no resolvable caller identity (401)
    - AuthorizationError: caller lacks the required permission (403)
    - NotFoundError: resource absent (404)
    - DomainError: service rejected a business rule (400)
    - InternalError: unexpected downstream failure (500, details hidden)
"""

from typing import Any

from fastapi import status


class ApiError(Exception):
    """Base exception for all errors surfaced to API callers.

    Attributes:
        message: Human-readable message returned to the client
        details: Optional extra information (e.g. the JSON decoder message)
        status_code: HTTP status used for the response
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    expose_details: bool = True

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def public_details(self) -> Any:
        """Return the details that may be sent to the client."""
        return self.details if self.expose_details else None


class ValidationError(ApiError):
    """Malformed identifier, query parameter or request body."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ApiError):
    """The caller identity could not be resolved."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(ApiError):
    """The caller does not hold the required permission."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class DomainError(ApiError):
    """A service rejected the operation (duplicate code, invalid state...)."""

    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(ApiError):
    """Unexpected failure not attributable to caller input.

    Details are kept for logging but never sent to the client.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    expose_details = False
