import socket
from collections import namedtuple
from unittest import mock

from barstatus.network import ipv4, ipv6, up

Addr = namedtuple("Addr", "family address netmask broadcast ptp")
Stat = namedtuple("Stat", "isup")

ADDRS = {
    "eth0": [
        Addr(socket.AF_INET6, "fe80::1%eth0", None, None, None),
        Addr(socket.AF_INET, "192.0.2.10", "255.255.255.0", None, None),
        Addr(socket.AF_INET, "192.0.2.11", "255.255.255.0", None, None),
    ],
    "wlan0": [Addr(socket.AF_INET, "198.51.100.7", None, None, None)],
}
STATS = {"eth0": Stat(True), "wlan0": Stat(False)}


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_ipv4_returns_first_matching_address(_addrs):
    assert ipv4("eth0") == "192.0.2.10"


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_ipv6_returns_address(_addrs):
    assert ipv6("eth0") == "fe80::1%eth0"


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_ipv6_missing_family_is_none(_addrs):
    assert ipv6("wlan0") is None


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_unknown_interface_is_none(_addrs):
    assert ipv4("nosuch0") is None


@mock.patch("psutil.net_if_stats", return_value=STATS)
@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_up_reports_link_state(_addrs, _stats):
    assert up("eth0") == "up"
    assert up("wlan0") == "down"


@mock.patch("psutil.net_if_stats", return_value=STATS)
@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_up_unknown_interface_is_none(_addrs, _stats):
    assert up("nosuch0") is None


@mock.patch("psutil.net_if_addrs", side_effect=OSError(1, "denied"))
def test_address_listing_failure_is_none(_addrs):
    assert ipv4("eth0") is None
    assert up("eth0") is None


def test_real_missing_interface():
    assert ipv4("no-such-iface-xyz") is None
    assert up("no-such-iface-xyz") is None