import io
import logging
import sys

import pytest

from hwprobe.core.logger import ConsoleHandler, ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture
def clean_root_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = (list(logger.handlers), logger.level)
    logger.handlers = [h for h in logger.handlers if not isinstance(h, ConsoleHandler)]
    yield logger
    logger.handlers, level = saved
    logger.setLevel(level)


def test_get_logger_nests_under_package():
    assert get_logger("hwprobe.core.usb").name == "hwprobe.core.usb"
    assert get_logger("tools").name == "hwprobe.tools"


def test_setup_logging_installs_one_handler(clean_root_logger):
    setup_logging()
    setup_logging(verbose=True)
    handlers = [h for h in clean_root_logger.handlers if isinstance(h, ConsoleHandler)]
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert clean_root_logger.level == logging.DEBUG


def test_setup_logging_follows_current_stderr(clean_root_logger, monkeypatch):
    setup_logging()
    captured = io.StringIO()
    monkeypatch.setattr(sys, "stderr", captured)
    setup_logging()
    get_logger("hwprobe.test").warning("disk gone")
    assert "WARNING hwprobe.test: disk gone" in captured.getvalue()
