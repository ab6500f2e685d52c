"""Process environment snapshot service."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, MutableMapping

from web_env.domain import EnvironmentSnapshot
from web_env.domain.models import HOSTNAME_KEY, LOCAL_IP_KEY

from .interfaces import EnvironmentSnapshotPort
from .resolution import environment_resolve_hostname, environment_resolve_local_ip

logger = logging.getLogger(__name__)


class ProcessEnvironmentSnapshotService(EnvironmentSnapshotPort):
    """Snapshot service backed by the live process environment table."""

    def __init__(
        self,
        publish_to_process_environment: bool = False,
        environ: MutableMapping[str, str] | None = None,
        hostname_resolver: Callable[[], str] = environment_resolve_hostname,
        local_ip_resolver: Callable[[], str] = environment_resolve_local_ip,
    ):
        """Initialize snapshot service.

        Args:
            publish_to_process_environment: When true, capture writes `HOSTNAME` and
                `LOCAL_IP` into the process environment before copying it, so later
                readers of the environment observe them. Concurrent captures then
                race with last writer winning.
            environ: Environment table to read. Defaults to `os.environ`.
            hostname_resolver: Callable returning the machine hostname.
            local_ip_resolver: Callable returning the first non-loopback address.

        Raises:
            ValueError: Raised when a resolver is None.
        """

        if hostname_resolver is None:
            raise ValueError("hostname_resolver must not be None")
        if local_ip_resolver is None:
            raise ValueError("local_ip_resolver must not be None")
        self._publish_to_process_environment = publish_to_process_environment
        self._environ = os.environ if environ is None else environ
        self._hostname_resolver = hostname_resolver
        self._local_ip_resolver = local_ip_resolver

    def environment_capture(self) -> EnvironmentSnapshot:
        """Capture the environment enriched with resolved hostname and local address.

        Returns:
            EnvironmentSnapshot: Fresh snapshot including `HOSTNAME` and `LOCAL_IP`.

        Raises:
            LocalAddressResolutionError: Raised when no local address can be resolved.
        """

        hostname = self._hostname_resolver()
        local_ip = self._local_ip_resolver()

        if self._publish_to_process_environment:
            self._environ[HOSTNAME_KEY] = hostname
            self._environ[LOCAL_IP_KEY] = local_ip
            return self.environment_current()

        variables = _environment_copy_table(self._environ)
        variables[HOSTNAME_KEY] = hostname
        variables[LOCAL_IP_KEY] = local_ip
        logger.debug("captured %d environment variables for %s", len(variables), hostname)
        return EnvironmentSnapshot(variables=variables)

    def environment_current(self) -> EnvironmentSnapshot:
        """Copy the environment exactly as the process currently sees it.

        Returns:
            EnvironmentSnapshot: Fresh snapshot without forced synthetic entries.
        """

        return EnvironmentSnapshot(variables=_environment_copy_table(self._environ))


def _environment_copy_table(environ: MutableMapping[str, str]) -> dict[str, str]:
    return {
        _environment_printable_text(name): _environment_printable_text(value)
        for name, value in dict(environ).items()
    }


def _environment_printable_text(text: str) -> str:
    # os.environ keeps undecodable bytes as lone surrogates; responses must be valid UTF-8.
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
