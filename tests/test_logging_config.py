"""Tests for the application logging setup."""
from __future__ import annotations

import logging

import pytest

from status_api.config.logging_config import LOGGER_NAME, configure_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_repeated_configuration_keeps_a_single_handler(app_logger) -> None:
    """Building several apps must not duplicate log lines."""

    configure_logging("INFO")
    returned = configure_logging("DEBUG")

    assert returned is app_logger
    assert len(app_logger.handlers) == 1
    assert app_logger.level == logging.DEBUG
