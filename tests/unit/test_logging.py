"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from campusledger.core.config import AppSettings
from campusledger.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("campusledger")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_level_comes_from_settings():
    configure_logging(AppSettings(log_level="debug"))
    assert logging.getLogger("campusledger").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    configure_logging(AppSettings(log_level="chatty"))
    assert logging.getLogger("campusledger").level == logging.INFO


def test_handler_is_added_once():
    configure_logging(AppSettings())
    configure_logging(AppSettings())
    assert len(logging.getLogger("campusledger").handlers) == 1
