"""FastAPI application factory for the identity responder.

This module defines API application composition used by the runtime
entrypoint and by tests.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.config import AppSettings
from app.domain import HostIdentity

from .routers import api_create_health_router, api_create_identity_router

logger = logging.getLogger(__name__)


def create_api_application(settings: AppSettings, host_identity: HostIdentity) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        host_identity: Replica identity captured at process startup.

    Returns:
        FastAPI: Framework application instance with identity and health routes.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(
        title="Replica Identity Service",
        description=f"environment={settings.environment_name}",
    )

    @application.exception_handler(Exception)
    async def api_unhandled_exception(request: Request, error: Exception) -> PlainTextResponse:
        """Convert unexpected handler faults into a 500 response.

        Args:
            request: Request whose handler failed.
            error: Unhandled exception.

        Returns:
            PlainTextResponse: Generic 500 response.
        """

        logger.error(
            "Unhandled fault serving %s %s: %s",
            request.method,
            request.url.path,
            type(error).__name__,
        )
        return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    application.include_router(api_create_identity_router(host_identity=host_identity))
    application.include_router(api_create_health_router())

    return application
