"""Typed domain models shared across runtime layers.

Every model here is created per request and discarded once the response is
sent. Nothing is cached or persisted.
"""

from collections.abc import Mapping
from dataclasses import dataclass


HOSTNAME_KEY = "HOSTNAME"
LOCAL_IP_KEY = "LOCAL_IP"


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Point-in-time copy of the process environment table.

    Attributes:
        variables: Variable name to value mapping in process iteration order.
    """

    variables: Mapping[str, str]

    @property
    def hostname(self) -> str:
        """Return the synthetic hostname entry or an empty string."""

        return self.variables.get(HOSTNAME_KEY, "")

    @property
    def local_ip(self) -> str:
        """Return the synthetic local address entry or an empty string."""

        return self.variables.get(LOCAL_IP_KEY, "")

    def __len__(self) -> int:
        return len(self.variables)


# Liveness body returned to probes; identical bytes on every call.
HEALTH_RESPONSE_BODY = "OK"
