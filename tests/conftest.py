"""Pytest configuration and fixtures."""

import logging

import pytest

from checkwise.config import reset_config

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def cleanup_checkwise_state():
    """Reset the active config and checkwise log handlers after each test."""
    yield

    reset_config()
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("checkwise"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
