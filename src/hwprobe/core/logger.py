"""Logging setup shared by the library and the CLI."""
from __future__ import annotations
import logging
import sys

ROOT_LOGGER = "hwprobe"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleHandler(logging.StreamHandler):
    """The stderr handler installed by setup_logging."""


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``hwprobe`` logger.

    Repeated calls reuse the handler and point it at the current
    ``sys.stderr``, so the CLI can run several times in one process.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    handler = next((h for h in logger.handlers if isinstance(h, ConsoleHandler)), None)
    if handler is None:
        handler = ConsoleHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setLevel(level)
    return logger
