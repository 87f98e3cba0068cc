"""Tests for logging configuration."""

import logging

from core.app_logging import configure_logging


def _named_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == "alumni-portal-api"]


def test_configure_logging_idempotent() -> None:
    root = logging.getLogger()
    for handler in _named_handlers():
        root.removeHandler(handler)

    configure_logging()
    first_count = len(_named_handlers())

    configure_logging("debug")
    second_count = len(_named_handlers())

    assert first_count == 1
    assert second_count == 1
    assert root.level == logging.DEBUG
