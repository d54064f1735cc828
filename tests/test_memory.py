import pytest

from barstatus import memory
from barstatus.util import fmt_human

MEMINFO = """\
MemTotal:           1000 kB
MemFree:             200 kB
MemAvailable:        500 kB
Buffers:             100 kB
Cached:              200 kB
SwapCached:          100 kB
Active:              300 kB
SwapTotal:          1000 kB
SwapFree:            600 kB
HugePages_Total:       0
"""


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    monkeypatch.setattr(memory, "_MEMINFO", str(path))
    return path


def test_read_meminfo_parses_fields(meminfo):
    info = memory.read_meminfo(str(meminfo))
    assert info["MemTotal"] == 1000
    assert info["SwapFree"] == 600
    assert info["HugePages_Total"] == 0


def test_read_meminfo_missing_file(tmp_path):
    assert memory.read_meminfo(str(tmp_path / "absent")) is None


def test_ram_total(meminfo):
    assert memory.ram_total(None) == fmt_human(1000 * 1024, 1024)


def test_ram_free_uses_available(meminfo):
    assert memory.ram_free(None) == fmt_human(500 * 1024, 1024)


def test_ram_used_excludes_buffers_and_cache(meminfo):
    assert memory.ram_used(None) == fmt_human((1000 - 200 - 100 - 200) * 1024, 1024)


def test_ram_perc(meminfo):
    assert memory.ram_perc(None) == "50"


def test_ram_perc_zero_total(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("MemTotal:           1000", "MemTotal:           0"))
    monkeypatch.setattr(memory, "_MEMINFO", str(path))
    assert memory.ram_perc(None) is None


def test_swap_values(meminfo):
    assert memory.swap_total(None) == fmt_human(1000 * 1024, 1024)
    assert memory.swap_free(None) == fmt_human(600 * 1024, 1024)
    assert memory.swap_used(None) == fmt_human((1000 - 600 - 100) * 1024, 1024)


def test_swap_perc(meminfo):
    assert memory.swap_perc(None) == "30"


def test_swap_perc_without_swap(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 0 kB\nSwapFree: 0 kB\nSwapCached: 0 kB\n")
    monkeypatch.setattr(memory, "_MEMINFO", str(path))
    assert memory.swap_perc(None) is None


def test_missing_field_gives_none(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    monkeypatch.setattr(memory, "_MEMINFO", str(path))
    assert memory.ram_used(None) is None
    assert memory.swap_total(None) is None


def test_missing_meminfo_gives_none(tmp_path, monkeypatch):
    monkeypatch.setattr(memory, "_MEMINFO", str(tmp_path / "absent"))
    assert memory.ram_total(None) is None