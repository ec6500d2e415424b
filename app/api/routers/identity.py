"""Root endpoint router reporting which replica served the request."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.domain import HostIdentity, domain_render_greeting


def api_create_identity_router(host_identity: HostIdentity) -> APIRouter:
    """Create router exposing the replica greeting at `/`.

    Args:
        host_identity: Identity resolved once at process startup.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when host_identity is invalid.
    """

    if host_identity is None:
        raise ValueError("host_identity must not be None")

    greeting = domain_render_greeting(host_identity)
    router = APIRouter(tags=["identity"])

    @router.get("/", response_class=PlainTextResponse)
    def api_identity_greeting() -> str:
        """Return greeting naming this replica.

        Returns:
            str: `Hello from <identity>!` body, constant for the process lifetime.
        """

        return greeting

    return router
