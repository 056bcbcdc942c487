"""Request binding helpers shared by the handlers.

Path identifiers and JSON bodies are parsed here so that every handler
fails the same way, before reaching its service.
"""

import re
from collections.abc import Mapping
from typing import TypeVar

import pydantic

from itsm_api.dto import RequestDTO
from itsm_api.errors import ValidationError

RequestT = TypeVar("RequestT", bound=RequestDTO)

_DIGITS = re.compile(r"[0-9]+")
_MAX_ID = 2**32 - 1

INVALID_ID = "ID invalide"
INVALID_DATA = "Données invalides"


def parse_id(value: str | None) -> int:
    """Parse an unsigned 32-bit decimal identifier.

    Args:
        value: The raw path segment

    Returns:
        The identifier

    Raises:
        ValidationError: If the value is missing, not decimal, or too large
    """
    if value is None or not _DIGITS.fullmatch(value):
        raise ValidationError(INVALID_ID)
    parsed = int(value)
    if parsed > _MAX_ID:
        raise ValidationError(INVALID_ID)
    return parsed


def path_id(params: Mapping[str, str], name: str = "id", fallback: str | None = None) -> int:
    """Read and parse an identifier from the path parameters.

    Args:
        params: Path parameters of the request
        name: Primary parameter name
        fallback: Legacy parameter name used when ``name`` is absent or empty

    Returns:
        The identifier
    """
    value = params.get(name)
    if not value and fallback is not None:
        value = params.get(fallback)
    return parse_id(value)


def bind_json(model: type[RequestT], body: bytes) -> RequestT:
    """Decode a JSON body into a request DTO.

    Args:
        model: The request DTO class
        body: Raw request body

    Returns:
        The validated DTO

    Raises:
        ValidationError: "Données invalides" carrying the decoder message
    """
    try:
        return model.model_validate_json(body)
    except pydantic.ValidationError as e:
        raise ValidationError(INVALID_DATA, details=str(e)) from e
