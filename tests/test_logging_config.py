# tests/test_logging_config.py

"""Tests for application logging setup."""

import logging

from xpboard.logging_config import configure_logging


def test_configure_logging_is_idempotent():
    """Repeated calls adjust the level without stacking handlers."""
    root = logging.getLogger()
    original_level = root.level
    handler_count = len(root.handlers)

    try:
        configure_logging("debug")
        configure_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) <= max(handler_count, 1)
    finally:
        for handler in root.handlers[handler_count:]:
            root.removeHandler(handler)
        root.setLevel(original_level)


def test_configure_logging_unknown_level_defaults_to_info():
    root = logging.getLogger()
    original_level = root.level

    try:
        configure_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.setLevel(original_level)
