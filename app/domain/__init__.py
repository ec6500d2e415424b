"""Domain models used across application layer boundaries."""

from .identity import (
    HostIdentityError,
    domain_parse_greeting,
    domain_render_greeting,
    domain_resolve_host_identity,
)
from .models import DistributionReport, HostIdentity

__all__ = [
    "DistributionReport",
    "HostIdentity",
    "HostIdentityError",
    "domain_parse_greeting",
    "domain_render_greeting",
    "domain_resolve_host_identity",
]
