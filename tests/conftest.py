"""Fixtures building a throwaway sysfs tree."""
from pathlib import Path

import pytest

DMI = Path("sys/devices/virtual/dmi/id")


class FakeSysfs:
    def __init__(self, root: Path):
        self.root = root
        (root / "sys" / "block").mkdir(parents=True)

    def dmi(self, vendor=None, family=None, product=None):
        d = self.root / DMI
        d.mkdir(parents=True, exist_ok=True)
        for name, value in (("sys_vendor", vendor), ("product_family", family), ("product_name", product)):
            if value is not None:
                (d / name).write_text(value + "\n")
        return self

    def block(self, name, rotational=None):
        dev = self.root / "sys" / "block" / name
        dev.mkdir(parents=True)
        if rotational is not None:
            (dev / "queue").mkdir()
            (dev / "queue" / "rotational").write_text(f"{rotational}\n")
        return self

    def populate(self, relpath, *entries):
        d = self.root / relpath
        d.mkdir(parents=True, exist_ok=True)
        for entry in entries:
            (d / entry).mkdir()
        return self


class FixedLister:
    def __init__(self, lines):
        self.lines = list(lines)
        self.calls = 0

    def list_devices(self):
        self.calls += 1
        return self.lines


@pytest.fixture
def fake_sysfs(tmp_path):
    return FakeSysfs(tmp_path)


@pytest.fixture
def laptop(fake_sysfs):
    """A Framework 13 with one NVMe drive and a spinning USB disk."""
    return (
        fake_sysfs.dmi("Framework", "13in Laptop", "Laptop (12th Gen Intel Core)")
        .block("nvme0n1", rotational=0)
        .block("sda", rotational=1)
        .block("loop0", rotational=0)
    )


@pytest.fixture(autouse=True)
def _no_env_root(monkeypatch):
    monkeypatch.delenv("HWPROBE_SYSFS_ROOT", raising=False)


@pytest.fixture
def usb_lister():
    return FixedLister
