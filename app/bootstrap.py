"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging
import socket

from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.distribution import HttpGreetingClient, ReplicaDistributionProbe
from app.domain import HostIdentity, domain_resolve_host_identity

logger = logging.getLogger(__name__)


class ServiceStartupError(RuntimeError):
    """Raised when the service cannot bind its listening socket."""


def bootstrap_resolve_host_identity(settings: AppSettings) -> HostIdentity:
    """Resolve the replica identity once for the process lifetime.

    Args:
        settings: Validated runtime settings.

    Returns:
        HostIdentity: Identity reported by the root endpoint.

    Raises:
        HostIdentityError: Raised when no identity can be resolved.
    """

    host_identity = domain_resolve_host_identity(override=settings.replica_identity)
    logger.info("Resolved replica identity %r from %s", host_identity.name, host_identity.source)
    return host_identity


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        HostIdentityError: Raised when the replica identity cannot be resolved.
    """

    resolved_settings = settings or config_load_settings()
    host_identity = bootstrap_resolve_host_identity(resolved_settings)
    return create_api_application(settings=resolved_settings, host_identity=host_identity)


def bootstrap_bind_listening_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on the service socket before the server loop starts.

    Args:
        host: Interface address to bind.
        port: TCP port to bind.

    Returns:
        socket.socket: Bound listening socket handed to the server.

    Raises:
        ServiceStartupError: Raised when the address cannot be bound.
    """

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        return socket.create_server((host, port), family=family, backlog=2048)
    except OSError as error:
        raise ServiceStartupError(f"unable to bind {host}:{port}: {error.strerror or error}") from error


def bootstrap_create_distribution_probe(
    base_url: str,
    request_timeout_seconds: float = 5.0,
) -> ReplicaDistributionProbe:
    """Build distribution probe for the `distribution-check` command.

    Args:
        base_url: Front-door URL to probe.
        request_timeout_seconds: Per-request timeout in seconds.

    Returns:
        ReplicaDistributionProbe: Probe wired to an HTTP greeting client.

    Raises:
        ValueError: Raised when the URL or timeout is invalid.
    """

    client = HttpGreetingClient(base_url=base_url, request_timeout_seconds=request_timeout_seconds)
    return ReplicaDistributionProbe(client=client)
