"""Tests for logging configuration."""

import logging

from nutriplan.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("nutriplan")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_level_and_quiet_http() -> None:
    configure_logging("debug")

    assert logging.getLogger("nutriplan").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging()
