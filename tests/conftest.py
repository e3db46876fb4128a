"""Shared fixtures for the date_tasks test suite."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DATE_TASKS_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("DATE_TASKS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    # Only plain handlers come from setup_logging; pytest's own are subclasses
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
