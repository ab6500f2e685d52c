"""Domain models used across application layer boundaries."""

from .models import HEALTH_RESPONSE_BODY, EnvironmentSnapshot

__all__ = ["HEALTH_RESPONSE_BODY", "EnvironmentSnapshot"]
