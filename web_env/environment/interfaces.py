"""Typed interfaces for environment snapshot capture."""

from typing import Protocol

from web_env.domain import EnvironmentSnapshot


class EnvironmentSnapshotPort(Protocol):
    """Port definition for reading the process environment per request."""

    def environment_capture(self) -> EnvironmentSnapshot:
        """Capture the environment enriched with resolved hostname and local address.

        Returns:
            EnvironmentSnapshot: Fresh snapshot including `HOSTNAME` and `LOCAL_IP`.

        Raises:
            LocalAddressResolutionError: Raised when no local address can be resolved.
        """

    def environment_current(self) -> EnvironmentSnapshot:
        """Copy the environment exactly as the process currently sees it.

        Returns:
            EnvironmentSnapshot: Fresh snapshot without forced synthetic entries.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """
