"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture) -> Generator[None, None, None]:
    """Capture debug records from the task package for every test."""
    with caplog.at_level(logging.DEBUG, logger="app.task"):
        yield
