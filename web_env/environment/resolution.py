"""Hostname and local network address resolution helpers."""

from __future__ import annotations

import ipaddress
import socket

from .errors import LocalAddressResolutionError

# Never receives traffic: connecting a UDP socket only selects a route.
_ROUTE_PROBE_ADDRESS = ("10.255.255.255", 1)


def environment_resolve_hostname() -> str:
    """Return the machine hostname reported by the operating system.

    Returns:
        str: Hostname text.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return socket.gethostname()


def environment_resolve_local_ip() -> str:
    """Return the first discoverable non-loopback local network address.

    The outbound route is tried first, then the addresses bound to the local
    hostname.

    Returns:
        str: Address text, for example `10.0.3.17`.

    Raises:
        LocalAddressResolutionError: Raised when every candidate is loopback or lookup fails.
    """

    routed_address = _environment_route_address()
    if routed_address is not None:
        return routed_address

    for candidate in _environment_hostname_addresses():
        if _environment_is_usable_address(candidate):
            return candidate

    raise LocalAddressResolutionError("no non-loopback local network address is available")


def _environment_route_address() -> str | None:
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe_socket:
            probe_socket.connect(_ROUTE_PROBE_ADDRESS)
            candidate = probe_socket.getsockname()[0]
    except OSError:
        return None
    if _environment_is_usable_address(candidate):
        return candidate
    return None


def _environment_hostname_addresses() -> list[str]:
    try:
        address_infos = socket.getaddrinfo(socket.gethostname(), None)
    except OSError:
        return []
    return [str(address_info[4][0]) for address_info in address_infos]


def _environment_is_usable_address(candidate: str) -> bool:
    try:
        address = ipaddress.ip_address(candidate.split("%", 1)[0])
    except ValueError:
        return False
    return not (address.is_loopback or address.is_unspecified)


__all__ = ["environment_resolve_hostname", "environment_resolve_local_ip"]
