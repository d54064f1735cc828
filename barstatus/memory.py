"""Components reporting RAM and swap usage from the kernel's meminfo."""

from __future__ import annotations

from .util import fmt_human, read_text

_MEMINFO = "/proc/meminfo"


def read_meminfo(path: str) -> dict[str, int] | None:
    """Return the kB values of a meminfo-style file, keyed by field name."""
    text = read_text(path)
    if text is None:
        return None
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        parts = rest.split()
        if not sep or not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(*names: str) -> tuple[int, ...] | None:
    info = read_meminfo(_MEMINFO)
    if info is None:
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _percent(part: int, whole: int) -> str:
    return str(int(100 * part / whole))


def ram_free(unused: str | None = None) -> str | None:
    """Return the memory available for new work."""
    values = _fields("MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Return used memory, excluding buffers and cache, in percent."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return _percent((total - free) - (buffers + cached), total)


def ram_total(unused: str | None = None) -> str | None:
    """Return the total amount of memory."""
    values = _fields("MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Return used memory, excluding buffers and cache."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: str | None = None) -> str | None:
    """Return the free swap space."""
    values = _fields("SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Return used swap, excluding swap cache, in percent."""
    values = _fields("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return _percent(total - free - cached, total)


def swap_total(unused: str | None = None) -> str | None:
    """Return the total swap space."""
    values = _fields("SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Return used swap, excluding swap cache."""
    values = _fields("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)