# json_overflow/infrastructure/config/__init__.py

"""Configuration infrastructure for json_overflow"""

# Local imports
from json_overflow.infrastructure.config._loader import get_config
from json_overflow.infrastructure.config._loader import reset_config
from json_overflow.infrastructure.config._models import CodecConfig

__all__ = ["CodecConfig", "get_config", "reset_config"]
