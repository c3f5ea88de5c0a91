"""Sysfs locations and runtime settings for hardware probing."""
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional, Union

SYSFS_ROOT_ENV = "HWPROBE_SYSFS_ROOT"
DEFAULT_SYSFS_ROOT = Path("/")

# Paths are relative to the sysfs root so a fake tree can stand in for /.
DMI_ID_DIR = Path("sys/devices/virtual/dmi/id")
VENDOR_FILE = DMI_ID_DIR / "sys_vendor"
PRODUCT_FAMILY_FILE = DMI_ID_DIR / "product_family"
PRODUCT_NAME_FILE = DMI_ID_DIR / "product_name"
BLOCK_DIR = Path("sys/block")
ROTATIONAL_FILE = Path("queue/rotational")
IIO_DEVICES_DIR = Path("sys/bus/iio/devices")
POWER_SUPPLY_DIR = Path("sys/class/power_supply")

DISK_PREFIXES = ("sd", "nvme")

LSUSB_COMMAND = "lsusb"


def sysfs_root(override: Optional[Union[str, Path]] = None) -> Path:
    if override:
        return Path(override)
    env = os.environ.get(SYSFS_ROOT_ENV)
    return Path(env) if env else DEFAULT_SYSFS_ROOT


def rotational_path(root: Path, device: str) -> Path:
    return root / BLOCK_DIR / device / ROTATIONAL_FILE
