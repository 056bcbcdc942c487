"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itsm_api.config import Settings, get_settings
from itsm_api.container import ServiceContainer, build_handlers, load_container
from itsm_api.observability import setup_logging

from .error_handlers import register_error_handlers
from .routes import routers

logger = logging.getLogger(__name__)

API_TITLE = "ITSM API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "HTTP handler layer of the ITSM backend"


def create_app(
    container: ServiceContainer | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        container: The collaborators. Loaded from ``settings.service_container``
            when omitted.
        settings: Application settings. Defaults to the environment settings.

    Returns:
        The configured application

    Raises:
        RuntimeError: If no container is given and SERVICE_CONTAINER is unset
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if container is None:
        if settings.service_container is None:
            raise RuntimeError("No service container. Set SERVICE_CONTAINER=package.module.factory")
        container = load_container(settings.service_container)
        logger.info("Service container loaded from %s", settings.service_container)

    app = FastAPI(title=API_TITLE, description=API_DESCRIPTION, version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Store in app.state (FastAPI pattern)
    app.state.handlers = build_handlers(container)
    app.state.caller_resolver = container.caller_resolver

    for router in routers:
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "endpoints": {
                "api": settings.api_prefix,
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "itsm_api.api.app:create_app",
        factory=True,
        host=_settings.api_host,
        port=_settings.api_port,
        reload=_settings.api_reload,
    )
