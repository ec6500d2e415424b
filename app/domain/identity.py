"""Host identity resolution and greeting text helpers."""

from __future__ import annotations

import socket
from typing import Callable, Final

from .models import HostIdentity

_GREETING_PREFIX: Final[str] = "Hello from "
_GREETING_SUFFIX: Final[str] = "!"


class HostIdentityError(RuntimeError):
    """Raised when the replica identity cannot be resolved."""


def domain_resolve_host_identity(
    override: str | None = None,
    hostname_provider: Callable[[], str] | None = None,
) -> HostIdentity:
    """Resolve the per-process replica identity.

    Args:
        override: Optional explicit identity, used when non-blank.
        hostname_provider: Optional hostname source, defaults to `socket.gethostname`.

    Returns:
        HostIdentity: Identity captured for the lifetime of the process.

    Raises:
        HostIdentityError: Raised when no non-blank identity can be resolved.
    """

    if override is not None and override.strip():
        return HostIdentity(name=override.strip(), source="override")

    provider = hostname_provider or socket.gethostname
    try:
        hostname = provider()
    except OSError as error:
        raise HostIdentityError("unable to read host name") from error

    normalized_hostname = (hostname or "").strip()
    if not normalized_hostname:
        raise HostIdentityError("host name must not be blank")
    return HostIdentity(name=normalized_hostname, source="hostname")


def domain_render_greeting(identity: HostIdentity) -> str:
    """Render the root endpoint body for one identity.

    Args:
        identity: Resolved replica identity.

    Returns:
        str: Greeting text in `Hello from <identity>!` form.
    """

    return f"{_GREETING_PREFIX}{identity.name}{_GREETING_SUFFIX}"


def domain_parse_greeting(body: str) -> str:
    """Extract the replica identity from a root endpoint body.

    Args:
        body: Response body text.

    Returns:
        str: Identity embedded in the greeting.

    Raises:
        ValueError: Raised when the body is not a greeting or the identity is blank.
    """

    normalized_body = body.strip()
    if not normalized_body.startswith(_GREETING_PREFIX) or not normalized_body.endswith(_GREETING_SUFFIX):
        raise ValueError(f"unexpected greeting body: {normalized_body[:80]!r}")

    identity = normalized_body[len(_GREETING_PREFIX) : -len(_GREETING_SUFFIX)].strip()
    if not identity:
        raise ValueError("greeting identity must not be blank")
    return identity
