"""Health endpoint router composition for orchestrator probes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


def api_create_health_router() -> APIRouter:
    """Create health-check router used for readiness and liveness probes.

    The handler performs no I/O.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health", response_class=PlainTextResponse)
    def api_health_status() -> str:
        """Return plain-text liveness status.

        Returns:
            str: Constant `OK` body.
        """

        return "OK"

    return router
