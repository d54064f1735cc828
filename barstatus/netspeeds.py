"""Components reporting network receive and transmit rates."""

from __future__ import annotations

from .util import fmt_human, read_uint

_SYSFS_NET = "/sys/class/net"
_DEFAULT_INTERVAL = 1000
_COUNTER_WRAP = 1 << 64


class NetSpeed:
    """Byte rates between successive reads of an interface's counters."""

    def __init__(self, interval: int = _DEFAULT_INTERVAL, sysfs: str = _SYSFS_NET) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.sysfs = sysfs
        self._rx = 0
        self._tx = 0

    def _rate(self, interface: str, counter: str, old: int) -> tuple[int, str | None]:
        value = read_uint(f"{self.sysfs}/{interface}/statistics/{counter}")
        if value is None:
            return old, None
        if old == 0:
            return value, None
        delta = (value - old) % _COUNTER_WRAP
        return value, fmt_human(delta * 1000 // self.interval, 1024)

    def rx(self, interface: str) -> str | None:
        """Return bytes received per second since the previous call."""
        self._rx, result = self._rate(interface, "rx_bytes", self._rx)
        return result

    def tx(self, interface: str) -> str | None:
        """Return bytes sent per second since the previous call."""
        self._tx, result = self._rate(interface, "tx_bytes", self._tx)
        return result


_speed = NetSpeed()


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of ``interface``."""
    return _speed.rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of ``interface``."""
    return _speed.tx(interface)