"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


class StatusError(Exception):
    """A fatal condition that stops the status program."""


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Format ``num`` with one decimal and an SI (1000) or IEC (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the whole text of ``path``, or None (with a warning) if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def read_uint(path: str) -> int | None:
    """Return the unsigned integer at the start of ``path``, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    if not match:
        return None
    return int(match.group(1))