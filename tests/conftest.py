"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up expectly loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("expectly")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]
