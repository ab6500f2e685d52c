"""Project-native typed exceptions for environment resolution failures."""

from __future__ import annotations


class EnvironmentResolutionError(RuntimeError):
    """Base exception for failures while deriving synthetic environment entries.

    Attributes:
        error_code: Stable code surfaced in API error payloads.
    """

    error_code = "ENVIRONMENT_UNRESOLVED"


class LocalAddressResolutionError(EnvironmentResolutionError):
    """No non-loopback local network address could be discovered."""

    error_code = "LOCAL_IP_UNRESOLVED"
