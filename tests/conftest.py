"""Shared pytest fixtures."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """Drop sinks added during a test so none outlive pytest's captured streams."""
    yield
    logger.remove()
