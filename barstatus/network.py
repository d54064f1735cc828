"""Components reporting interface addresses and link state."""

from __future__ import annotations

import socket

import psutil

from .util import warn


def _addresses() -> dict[str, list] | None:
    try:
        return psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror or exc}")
        return None


def _ip(interface: str, family: int) -> str | None:
    addresses = _addresses()
    if addresses is None:
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family and entry.address:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """Return 'up' or 'down' for ``interface``, or None if it has no address."""
    addresses = _addresses()
    if addresses is None:
        return None
    if not any(entry.address for entry in addresses.get(interface, ())):
        return None
    try:
        stats = psutil.net_if_stats()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror or exc}")
        return None
    info = stats.get(interface)
    if info is None:
        return None
    return "up" if info.isup else "down"