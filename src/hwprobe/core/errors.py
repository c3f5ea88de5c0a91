"""Error taxonomy for hardware probing."""
from __future__ import annotations
from typing import Optional


class HardwareProbeError(Exception):
    """Construction of a HardwareProbe failed; nothing was acquired."""

    what = "hardware information"

    def __init__(self, source: str, cause: Optional[BaseException] = None):
        self.source = source
        self.cause = str(cause) if cause is not None else ""
        detail = f": {self.cause}" if self.cause else ""
        super().__init__(f"Unable to read {self.what} from {source}{detail}")


class VendorReadError(HardwareProbeError):
    what = "vendor"


class FamilyReadError(HardwareProbeError):
    what = "product family"


class ProductReadError(HardwareProbeError):
    what = "product name"


class DeviceEnumerationError(HardwareProbeError):
    what = "block device list"


class DiskTopologyError(SystemExit):
    """A block device recorded at construction can no longer be read.

    Subclasses SystemExit: the process terminates unless a caller catches
    it explicitly, and ``except Exception`` does not swallow it.
    """

    def __init__(self, device: str, cause: Optional[BaseException] = None):
        self.device = device
        self.cause = str(cause) if cause is not None else ""
        super().__init__(f"Error: impossible to read disk info for {device}: {self.cause}")
