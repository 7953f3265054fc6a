# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from json_overflow.infrastructure.config import reset_config


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Reset logging and the cached default config around every test"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    reset_config()

    yield

    reset_config()
