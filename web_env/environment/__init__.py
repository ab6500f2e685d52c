"""Environment package for hostname, local address and snapshot capture."""

from .errors import EnvironmentResolutionError, LocalAddressResolutionError
from .interfaces import EnvironmentSnapshotPort
from .resolution import environment_resolve_hostname, environment_resolve_local_ip
from .snapshot_service import ProcessEnvironmentSnapshotService

__all__ = [
    "EnvironmentResolutionError",
    "EnvironmentSnapshotPort",
    "LocalAddressResolutionError",
    "ProcessEnvironmentSnapshotService",
    "environment_resolve_hostname",
    "environment_resolve_local_ip",
]
