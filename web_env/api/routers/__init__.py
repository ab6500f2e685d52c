"""API router package for endpoint composition."""

from .environment import api_create_environment_router
from .health import api_create_health_router

__all__ = ["api_create_environment_router", "api_create_health_router"]
