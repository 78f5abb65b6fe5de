"""Shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_todocli_logger():
    """Drop handlers added by setup_logging so tests stay isolated."""
    logger = logging.getLogger("todocli")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Ignore TODO_* settings from the developer's environment."""
    for name in ("TODO_TASKS_FILE", "TODO_VERBOSE", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
