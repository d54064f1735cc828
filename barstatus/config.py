"""Status bar configuration: update interval, placeholder text and the component list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import battery, cpu, disk, files, memory, netspeeds, network, system, volume, wifi

Component = Callable[[Optional[str]], Optional[str]]

# Interval between updates, in milliseconds.
INTERVAL = 1000

# Text shown where a component cannot produce a value.
UNKNOWN_STR = "n/a"

# Maximum length of the whole status line.
MAXLEN = 2048

COMPONENTS: dict[str, Component] = {
    "battery_perc": battery.battery_perc,
    "battery_remaining": battery.battery_remaining,
    "battery_state": battery.battery_state,
    "cat": files.cat,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": system.datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": netspeeds.netspeed_rx,
    "netspeed_tx": netspeeds.netspeed_tx,
    "num_files": files.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": files.run_command,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": system.temp,
    "uid": system.uid,
    "up": network.up,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_essid": wifi.wifi_essid,
    "wifi_perc": wifi.wifi_perc,
}


@dataclass(frozen=True)
class StatusArg:
    """One entry of the status line: a component, a printf-style format and its argument."""

    func: Component
    fmt: str
    args: Optional[str] = None


def component(name: str) -> Component:
    """Return the component function registered under ``name``."""
    try:
        return COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component {name!r}") from None


ARGS: tuple[StatusArg, ...] = (
    StatusArg(component("wifi_essid"), "%s", "wlp1s0"),
    StatusArg(component("wifi_perc"), " (%s%%)|", "wlp1s0"),
    StatusArg(component("battery_perc"), "%s%%", "BAT0"),
    StatusArg(component("battery_remaining"), " (%s)|", "BAT0"),
    StatusArg(component("datetime"), "%s", "%a, %d %b %R"),
)