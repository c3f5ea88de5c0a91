"""Helpers for reading sysfs and capturing utility output."""
from __future__ import annotations
import os
import subprocess
from pathlib import Path
from typing import List, Sequence

from .logger import get_logger

log = get_logger(__name__)


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def run_capture(cmd: Sequence[str]) -> tuple[int, str, str]:
    """Run ``cmd`` and return (returncode, stdout, stderr).

    Output is decoded lossily. OSError from a missing or non-executable
    binary propagates to the caller.
    """
    log.debug("RUN(CAP): %s", " ".join(cmd))
    proc = subprocess.run(list(cmd), capture_output=True)
    return (proc.returncode, _decode(proc.stdout), _decode(proc.stderr))


def read_sysfs_text(path: Path) -> str:
    """Return the stripped text of a sysfs attribute.

    Raises OSError or UnicodeDecodeError when the attribute cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip()


def list_dir(path: Path) -> List[str]:
    return os.listdir(path)


def dir_has_entries(path: Path) -> bool:
    try:
        if not path.is_dir():
            return False
        with os.scandir(path) as it:
            return next(it, None) is not None
    except OSError as exc:
        log.debug("Cannot inspect %s: %s", path, exc)
        return False
