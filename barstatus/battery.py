"""Components reporting battery charge, state and remaining time."""

from __future__ import annotations

import os
import re

from .util import read_text, read_uint

_POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_INT = re.compile(r"\s*([+-]?\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _path(bat: str, name: str) -> str:
    return f"{_POWER_SUPPLY}/{bat}/{name}"


def _pick(bat: str, first: str, second: str) -> str | None:
    """Return the path of the first readable attribute of ``bat``."""
    for name in (first, second):
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(bat: str) -> str | None:
    text = read_text(_path(bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def battery_perc(bat: str) -> str | None:
    """Return the battery's charge in percent."""
    text = read_text(_path(bat, "capacity"))
    if text is None:
        return None
    match = _INT.match(text)
    if not match:
        return None
    return str(int(match.group(1)))


def battery_state(bat: str) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"