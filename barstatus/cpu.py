"""Components reporting processor frequency and usage."""

from __future__ import annotations

from .util import fmt_human, read_text, read_uint

_CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
_PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused: str | None = None) -> str | None:
    """Return the current frequency of the first CPU with an SI prefix."""
    khz = read_uint(_CPU_FREQ)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


class CpuUsage:
    """CPU usage between successive samples of the kernel's time counters."""

    def __init__(self, stat_path: str = _PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: tuple[float, ...] = (0.0,) * _FIELDS

    def _sample(self) -> tuple[float, ...] | None:
        text = read_text(self.stat_path)
        if text is None:
            return None
        tokens = text.split()[1 : 1 + _FIELDS]
        if len(tokens) != _FIELDS:
            return None
        try:
            return tuple(float(token) for token in tokens)
        except ValueError:
            return None

    def perc(self, unused: str | None = None) -> str | None:
        """Return the busy share in percent since the previous call."""
        old = self._previous
        new = self._sample()
        if new is None:
            return None
        self._previous = new
        if old[0] == 0:
            return None
        total = sum(new) - sum(old)
        if total == 0:
            return None
        busy = sum(new[i] for i in _BUSY) - sum(old[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_perc(unused: str | None = None) -> str | None:
    """Return the system-wide CPU usage in percent since the previous call."""
    return _usage.perc(unused)