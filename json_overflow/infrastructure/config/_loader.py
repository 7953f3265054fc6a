# json_overflow/infrastructure/config/_loader.py

"""Default configuration access"""

# Standard library imports
from pathlib import Path

# Local imports
from json_overflow.infrastructure.config._models import CodecConfig

_default_config: CodecConfig | None = None


def get_config(config_path: Path | str | None = None) -> CodecConfig:
    """Get codec configuration

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        CodecConfig instance
    """
    global _default_config

    if config_path:
        return CodecConfig.load(config_path)

    if _default_config is None:
        _default_config = CodecConfig()

    return _default_config


def reset_config() -> None:
    """Drop the cached default configuration"""
    global _default_config
    _default_config = None
