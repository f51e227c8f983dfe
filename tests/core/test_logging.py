"""Tests for the package logger setup."""

import logging

import pytest

from port_picker import logger, setup_port_picker_logging


@pytest.fixture
def restore_logger():
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.usefixtures("restore_logger")
def test_setup_logging_installs_single_stdout_handler(capsys):
    """Verify repeated setup keeps one handler and writes the package prefix to stdout."""
    setup_port_picker_logging(logging.DEBUG)
    setup_port_picker_logging(logging.DEBUG)

    assert len(logger.handlers) == 1
    assert logger.propagate is False

    logger.debug("probing")
    assert "[PortPicker] [DEBUG] probing" in capsys.readouterr().out


@pytest.mark.usefixtures("restore_logger")
def test_setup_logging_accepts_level_name():
    """Verify level names are accepted."""
    setup_port_picker_logging("warning")

    assert logger.level == logging.WARNING
