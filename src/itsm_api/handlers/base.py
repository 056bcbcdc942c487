"""Shared outcome mapping for resource handlers.

Each helper awaits exactly one service call and classifies its failure:

    - _fetch: read failed -> InternalError (500, detail hidden)
    - _lookup: lookup failed -> NotFoundError (404)
    - _apply: mutation rejected -> DomainError (400, service message)

Errors already classified by the service (ApiError) pass through unchanged.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from itsm_api.access import AccessGuard
from itsm_api.errors import ApiError, DomainError, InternalError, NotFoundError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceHandler:
    """Base class for the resource handlers."""

    def __init__(self, guard: AccessGuard) -> None:
        self._guard = guard

    async def _fetch(self, call: Awaitable[T], error_message: str) -> T:
        try:
            return await call
        except ApiError:
            raise
        except Exception as e:
            logger.exception("%s: %s", type(self).__name__, error_message)
            raise InternalError(error_message, details=str(e)) from e

    async def _lookup(self, call: Awaitable[T], not_found_message: str) -> T:
        try:
            return await call
        except ApiError:
            raise
        except Exception as e:
            logger.debug("%s lookup failed: %s", type(self).__name__, e)
            raise NotFoundError(not_found_message) from e

    async def _apply(self, call: Awaitable[T]) -> T:
        try:
            return await call
        except ApiError:
            raise
        except Exception as e:
            raise DomainError(str(e)) from e
