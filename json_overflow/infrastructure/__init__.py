# json_overflow/infrastructure/__init__.py

"""Configuration and logging infrastructure"""

# Local imports
from json_overflow.infrastructure.config import CodecConfig
from json_overflow.infrastructure.config import get_config
from json_overflow.infrastructure.logging import setup_logging

__all__ = ["CodecConfig", "get_config", "setup_logging"]
