"""
hwprobe - hardware identity facts for Linux machines.

Reads DMI vendor/family/model, block device media and peripheral presence
(fingerprint reader, IIO sensors, battery) from sysfs and ``lsusb``.
"""

from .core.errors import (
    DeviceEnumerationError,
    DiskTopologyError,
    FamilyReadError,
    HardwareProbeError,
    ProductReadError,
    VendorReadError,
)
from .core.hardware_probe import HardwareProbe
from .core.usb import LsusbLister, UsbDeviceLister

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "HardwareProbe",
    "HardwareProbeError",
    "VendorReadError",
    "FamilyReadError",
    "ProductReadError",
    "DeviceEnumerationError",
    "DiskTopologyError",
    "UsbDeviceLister",
    "LsusbLister",
]
