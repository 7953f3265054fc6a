# json_overflow/infrastructure/logging/__init__.py

"""Logging infrastructure for json_overflow"""

# Local imports
from json_overflow.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging"]
