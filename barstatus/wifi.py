"""Components reporting the wireless network name and signal strength."""

from __future__ import annotations

import socket
import struct
import sys

from .util import warn

_NLMSG_HDR = struct.Struct("=IHHII")
_GENL_HDR = struct.Struct("=BBH")
_NLA_HDR = struct.Struct("=HH")
_NLMSG_HDRLEN = _NLMSG_HDR.size
_GENL_HDRLEN = _GENL_HDR.size
_NLA_HDRLEN = _NLA_HDR.size
_NLA_TYPE_MASK = 0x3FFF

_NETLINK_GENERIC = 16
_NLM_F_REQUEST = 0x1
_NLM_F_DUMP = 0x300
_NLMSG_DONE = 3

_GENL_ID_CTRL = 0x10
_CTRL_CMD_GETFAMILY = 3
_CTRL_ATTR_FAMILY_ID = 1
_CTRL_ATTR_FAMILY_NAME = 2

_NL80211_CMD_GET_INTERFACE = 5
_NL80211_CMD_GET_STATION = 17
_NL80211_ATTR_IFINDEX = 3
_NL80211_ATTR_STA_INFO = 21
_NL80211_ATTR_SSID = 52
_NL80211_STA_INFO_SIGNAL_AVG = 13

_FAMILY_NAME = b"nl80211\0"
_RESPONSE_SIZE = 4096


def _align(length: int) -> int:
    return (length + 3) & ~3


def rssi_to_perc(rssi: int) -> int:
    """Map a signal level in dBm to a quality percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type ``attr``."""
    offset = 0
    while offset + _NLA_HDRLEN <= len(data):
        length, kind = _NLA_HDR.unpack_from(data, offset)
        if length < _NLA_HDRLEN:
            return None
        if kind & _NLA_TYPE_MASK == attr:
            return data[offset + _NLA_HDRLEN : offset + length]
        offset += _align(length)
    return None


def _message(msg_type: int, flags: int, seq: int, cmd: int, attr: int, payload: bytes) -> bytes:
    attribute = _NLA_HDR.pack(_NLA_HDRLEN + len(payload), attr) + payload
    attribute += b"\0" * (_align(len(attribute)) - len(attribute))
    body = _GENL_HDR.pack(cmd, 1, 0) + attribute
    return _NLMSG_HDR.pack(_NLMSG_HDRLEN + len(body), msg_type, flags, seq, 0) + body


class _Nl80211:
    """A generic netlink connection to the kernel's wireless subsystem."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._seq = 1
        self._family = 0

    def _next_seq(self) -> int:
        seq = self._seq
        self._seq += 1
        return seq

    def _socket(self) -> socket.socket | None:
        if self._sock is None:
            family = getattr(socket, "AF_NETLINK", None)
            if family is None:
                warn("socket 'AF_NETLINK': not supported on this platform")
                return None
            try:
                self._sock = socket.socket(family, socket.SOCK_RAW, _NETLINK_GENERIC)
            except OSError as exc:
                warn(f"socket 'AF_NETLINK': {exc.strerror or exc}")
                return None
        return self._sock

    def exchange(self, request: bytes) -> bytes | None:
        """Send ``request`` and return the first response datagram."""
        sock = self._socket()
        if sock is None:
            return None
        try:
            sent = sock.send(request)
        except OSError as exc:
            warn(f"send 'AF_NETLINK': {exc.strerror or exc}")
            return None
        if sent != len(request):
            warn("send 'AF_NETLINK': short write")
            return None
        return self.receive()

    def receive(self) -> bytes | None:
        sock = self._socket()
        if sock is None:
            return None
        try:
            return sock.recv(_RESPONSE_SIZE)
        except OSError as exc:
            warn(f"recv 'AF_NETLINK': {exc.strerror or exc}")
            return None

    def family(self) -> int:
        """Return the nl80211 family id, resolving it once."""
        if self._family:
            return self._family
        request = _message(
            _GENL_ID_CTRL,
            _NLM_F_REQUEST,
            self._next_seq(),
            _CTRL_CMD_GETFAMILY,
            _CTRL_ATTR_FAMILY_NAME,
            _FAMILY_NAME,
        )
        response = self.exchange(request)
        if response is None or len(response) <= len(request):
            return 0
        payload = find_attr(_CTRL_ATTR_FAMILY_ID, response[len(request) :])
        if payload is not None and len(payload) == 2:
            (self._family,) = struct.unpack("=H", payload)
        return self._family

    def request(self, family: int, flags: int, cmd: int, index: int) -> bytes | None:
        message = _message(
            family,
            flags,
            self._next_seq(),
            cmd,
            _NL80211_ATTR_IFINDEX,
            struct.pack("=I", index),
        )
        return self.exchange(message)


_netlink = _Nl80211()


def _ifindex(interface: str) -> int:
    try:
        return socket.if_nametoindex(interface)
    except OSError as exc:
        warn(f"ioctl 'SIOCGIFINDEX': {exc.strerror or exc}")
        return -1


def _not_found(interface: str) -> None:
    print(f"interface {interface} not found", file=sys.stderr)


def wifi_essid(interface: str) -> str | None:
    """Return the SSID the wireless ``interface`` is connected to."""
    index = _ifindex(interface)
    if index < 0:
        _not_found(interface)
        return None
    family = _netlink.family()
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    response = _netlink.request(family, _NLM_F_REQUEST, _NL80211_CMD_GET_INTERFACE, index)
    if response is None or len(response) <= _NLMSG_HDRLEN + _GENL_HDRLEN:
        return None
    ssid = find_attr(_NL80211_ATTR_SSID, response[_NLMSG_HDRLEN + _GENL_HDRLEN :])
    if ssid is None:
        return None
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _station_strength(message: bytes) -> str | None:
    info = find_attr(_NL80211_ATTR_STA_INFO, message[_NLMSG_HDRLEN + _GENL_HDRLEN :])
    if info is None:
        return None
    signal = find_attr(_NL80211_STA_INFO_SIGNAL_AVG, info)
    if signal is None or len(signal) != 1:
        return None
    (rssi,) = struct.unpack("=b", signal)
    return str(rssi_to_perc(rssi))


def wifi_perc(interface: str) -> str | None:
    """Return the average signal quality of ``interface`` in percent."""
    index = _ifindex(interface)
    if index < 0:
        _not_found(interface)
        return None
    family = _netlink.family()
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    response = _netlink.request(
        family, _NLM_F_REQUEST | _NLM_F_DUMP, _NL80211_CMD_GET_STATION, index
    )
    strength: str | None = None
    while response is not None:
        if len(response) < _NLMSG_HDRLEN:
            return None
        offset = 0
        while len(response) - offset >= _NLMSG_HDRLEN:
            length, msg_type, _flags, _seq, _pid = _NLMSG_HDR.unpack_from(response, offset)
            end = min(offset + length, len(response))
            if strength is None and length > _NLMSG_HDRLEN + _GENL_HDRLEN:
                strength = _station_strength(response[offset:end])
            if msg_type == _NLMSG_DONE:
                return strength
            if end <= offset:
                break
            offset = end
        response = _netlink.receive()
    return None