"""API router package for endpoint composition."""

from .health import api_create_health_router
from .identity import api_create_identity_router

__all__ = ["api_create_health_router", "api_create_identity_router"]
