"""Component reporting the master volume of an OSS mixer."""

from __future__ import annotations

import os
import struct

from .util import warn

_IOC_READ = 2
_MIXER_MAGIC = ord("M")
_INT_SIZE = 4
_VOLUME_CHANNEL = 0  # "vol" is the first of the OSS device names


def _ior(number: int) -> int:
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (_MIXER_MAGIC << 8) | number


_SOUND_MIXER_READ_DEVMASK = _ior(0xFE)


def _read_int(fd: int, request: int) -> int:
    import fcntl

    raw = fcntl.ioctl(fd, request, b"\0" * _INT_SIZE)
    (value,) = struct.unpack("=i", raw)
    return value


def vol_perc(card: str) -> str | None:
    """Return the master volume of mixer device ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None
    try:
        try:
            devmask = _read_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None
        if not devmask & (1 << _VOLUME_CHANNEL):
            return None
        try:
            value = _read_int(fd, _ior(_VOLUME_CHANNEL))
        except OSError as exc:
            warn(f"ioctl 'MIXER_READ({_VOLUME_CHANNEL})': {exc.strerror or exc}")
            return None
    finally:
        os.close(fd)
    return str(value & 0xFF)