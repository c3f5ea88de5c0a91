"""
hwprobe hardware facts
Reads DMI identity, block devices and peripheral presence from sysfs
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Type, Union

from . import config
from .errors import (
    DeviceEnumerationError, DiskTopologyError, FamilyReadError,
    HardwareProbeError, ProductReadError, VendorReadError,
)
from .logger import get_logger
from .platform_utils import dir_has_entries, list_dir, read_sysfs_text
from .usb import LsusbLister, UsbDeviceLister
from .vendor_database import normalize_family, normalize_product, normalize_vendor

log = get_logger(__name__)

RootArg = Optional[Union[str, Path]]


def _read_dmi(root: Path, relpath: Path, error: Type[HardwareProbeError]) -> str:
    path = root / relpath
    try:
        return read_sysfs_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Failed to read %s: %s", path, exc)
        raise error(str(path), exc) from exc


def _list_block_devices(root: Path) -> Tuple[str, ...]:
    path = root / config.BLOCK_DIR
    try:
        names = list_dir(path)
    except OSError as exc:
        log.warning("Failed to list block devices in %s: %s", path, exc)
        raise DeviceEnumerationError(str(path), exc) from exc
    return tuple(n for n in names if n.startswith(config.DISK_PREFIXES))


@dataclass(frozen=True)
class HardwareProbe:
    """Identity and storage facts of the local machine, read once."""
    vendor: str
    product_family: str
    product_name: str
    disk_devices: Tuple[str, ...] = ()
    root: Path = field(default=config.DEFAULT_SYSFS_ROOT, repr=False, compare=False)

    @classmethod
    def detect(cls, root: RootArg = None) -> "HardwareProbe":
        """Read DMI identity and the block device list.

        Vendor is resolved first because family normalization depends on it.
        Raises VendorReadError, FamilyReadError, ProductReadError or
        DeviceEnumerationError; the first failure stops construction.
        """
        base = config.sysfs_root(root)
        log.debug("Probing hardware under %s", base)

        vendor = normalize_vendor(_read_dmi(base, config.VENDOR_FILE, VendorReadError))
        family = normalize_family(
            vendor, _read_dmi(base, config.PRODUCT_FAMILY_FILE, FamilyReadError)
        )
        product = normalize_product(_read_dmi(base, config.PRODUCT_NAME_FILE, ProductReadError))
        disks = _list_block_devices(base)

        log.info("Detected %s %s (%s), disks: %s", vendor, product, family, ", ".join(disks) or "none")
        return cls(
            vendor=vendor,
            product_family=family,
            product_name=product,
            disk_devices=disks,
            root=base,
        )

    # Environment probes: any failure means "not detected".

    @staticmethod
    def has_iio_device(root: RootArg = None) -> bool:
        return dir_has_entries(config.sysfs_root(root) / config.IIO_DEVICES_DIR)

    @staticmethod
    def is_laptop(root: RootArg = None) -> bool:
        return dir_has_entries(config.sysfs_root(root) / config.POWER_SUPPLY_DIR)

    @staticmethod
    def has_fingerprint_device(lister: Optional[UsbDeviceLister] = None) -> bool:
        lister = lister if lister is not None else LsusbLister()
        for line in lister.list_devices():
            if "fingerprint" in line.lower():
                log.debug("Fingerprint reader: %s", line.strip())
                return True
        return False

    # Disk classification

    def _rotational(self, device: str) -> str:
        path = config.rotational_path(self.root, device)
        try:
            return read_sysfs_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            log.critical("Disk %s vanished or is unreadable (%s)", device, path)
            raise DiskTopologyError(device, exc) from exc

    def _is_hdd(self, device: str) -> bool:
        return self._rotational(device) == "1"

    def _is_ssd(self, device: str) -> bool:
        return self._rotational(device) == "0"

    def has_hdd(self) -> bool:
        """True at the first recorded disk with spinning media.

        An unreadable rotational flag raises DiskTopologyError, which
        terminates the process.
        """
        return any(self._is_hdd(d) for d in self.disk_devices)

    def has_ssd(self) -> bool:
        return any(self._is_ssd(d) for d in self.disk_devices)

    def disk_media(self) -> Dict[str, str]:
        media = {}
        for device in self.disk_devices:
            flag = self._rotational(device)
            media[device] = {"1": "hdd", "0": "ssd"}.get(flag, "unknown")
        return media
