# tests/unit/infrastructure/config/test_loader.py

"""Test codec configuration loading"""

# Standard library imports
from json import dumps
from logging import WARNING
from os import unlink
from tempfile import NamedTemporaryFile

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from json_overflow.infrastructure.config import CodecConfig
from json_overflow.infrastructure.config import get_config


def _write_config(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        f.write(content)
        return f.name


class TestCodecConfig:
    """Test the CodecConfig model"""

    def test_default_values(self):
        """Test defaults match the codec's standard behavior"""
        config = CodecConfig()
        assert config.overflow_field == "overflow"
        assert config.by_alias is True
        assert config.exclude_none is False
        assert config.exclude_defaults is False
        assert config.sort_keys is True

    def test_dump_options(self):
        """Test serialization keyword arguments"""
        config = CodecConfig(by_alias=False, exclude_none=True)
        assert config.dump_options() == {
            "by_alias": False,
            "exclude_none": True,
            "exclude_defaults": False,
        }

    def test_invalid_field_name_rejected(self):
        """Test overflow_field must be an identifier"""
        with pytest.raises(ValidationError):
            CodecConfig(overflow_field="not a name")

    def test_unknown_option_rejected(self):
        """Test typos in option names are errors"""
        with pytest.raises(ValidationError):
            CodecConfig(sort_key=False)

    def test_config_is_frozen(self):
        """Test configs cannot be changed after creation"""
        config = CodecConfig()
        with pytest.raises(ValidationError):
            config.sort_keys = False


class TestConfigLoading:
    """Test loading configuration from JSON files"""

    def test_load_custom_file(self):
        """Test values from a JSON file are applied"""
        config_path = _write_config(dumps({"overflow_field": "extras", "sort_keys": False}))
        try:
            config = CodecConfig.load(config_path)
            assert config.overflow_field == "extras"
            assert config.sort_keys is False
            assert config.by_alias is True
        finally:
            unlink(config_path)

    def test_load_none_returns_defaults(self):
        """Test no path gives the default config"""
        assert CodecConfig.load(None) == CodecConfig()

    def test_missing_file_warns_and_returns_defaults(self, caplog):
        """Test a missing file falls back to defaults with a warning"""
        caplog.set_level(WARNING)
        config = CodecConfig.load("/nonexistent/codec.json")
        assert config == CodecConfig()
        assert "not found" in caplog.text

    def test_invalid_json_warns_and_returns_defaults(self, caplog):
        """Test malformed config files fall back to defaults"""
        caplog.set_level(WARNING)
        config_path = _write_config("{not json")
        try:
            assert CodecConfig.load(config_path) == CodecConfig()
            assert "Failed to load config" in caplog.text
        finally:
            unlink(config_path)

    def test_invalid_values_warn_and_return_defaults(self, caplog):
        """Test configs failing validation fall back to defaults"""
        caplog.set_level(WARNING)
        config_path = _write_config(dumps({"overflow_field": ""}))
        try:
            assert CodecConfig.load(config_path) == CodecConfig()
            assert "Failed to load config" in caplog.text
        finally:
            unlink(config_path)


class TestGetConfig:
    """Test the cached default config"""

    def test_default_is_cached(self):
        """Test repeated calls return the same instance"""
        assert get_config() is get_config()

    def test_explicit_path_loads_fresh(self):
        """Test a path bypasses the cache"""
        config_path = _write_config(dumps({"sort_keys": False}))
        try:
            config = get_config(config_path)
            assert config.sort_keys is False
            assert get_config().sort_keys is True
        finally:
            unlink(config_path)
