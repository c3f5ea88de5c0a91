"""USB device listing behind a one-method capability."""
from __future__ import annotations
from typing import List, Protocol

from .config import LSUSB_COMMAND
from .logger import get_logger
from .platform_utils import run_capture

log = get_logger(__name__)


class UsbDeviceLister(Protocol):
    def list_devices(self) -> List[str]:
        """Return one description line per attached USB device."""
        ...


class LsusbLister:
    """Lists USB devices by running ``lsusb`` without arguments.

    No timeout is applied; a hung utility blocks the caller.
    """

    def __init__(self, command: str = LSUSB_COMMAND):
        self.command = command

    def list_devices(self) -> List[str]:
        try:
            code, out, err = run_capture([self.command])
        except OSError as exc:
            log.debug("Cannot run %s: %s", self.command, exc)
            return []
        if code != 0:
            log.warning("%s exited with status %s: %s", self.command, code, err.strip())
        return [line for line in out.splitlines() if line.strip()]
