"""FastAPI exception handlers rendering failures as the response envelope.

Collaborators:
  - app.create_app: registers these handlers
  - itsm_api.errors: the ApiError taxonomy raised by handlers and services

Every failure leaves the API in the same envelope shape:
``{"success": false, "message": ..., "data": null, "error": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from itsm_api.dto import Envelope
from itsm_api.errors import ApiError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erreur interne du serveur"


def _render(status_code: int, envelope: Envelope) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.to_content())


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Handle every error of the taxonomy."""
    logger.warning(
        exc.message,
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return _render(exc.status_code, Envelope.failure(exc.message, exc.public_details()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing failures (unknown path, wrong method) raised by Starlette."""
    logger.warning(
        str(exc.detail),
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=Envelope.failure(str(exc.detail)).to_content(),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle FastAPI's own parameter validation failures as bad requests."""
    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status.HTTP_400_BAD_REQUEST,
            "error_type": type(exc).__name__,
        },
    )
    envelope = Envelope.failure("Données invalides", details=str(exc))
    return _render(status.HTTP_400_BAD_REQUEST, envelope)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for unexpected exceptions: generic message, details logged only."""
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "error_type": type(exc).__name__,
        },
    )
    return _render(status.HTTP_500_INTERNAL_SERVER_ERROR, Envelope.failure(INTERNAL_ERROR_MESSAGE))


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Usage:
        register_error_handlers(app)
    """
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
