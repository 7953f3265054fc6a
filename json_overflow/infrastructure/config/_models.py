# json_overflow/infrastructure/config/_models.py

"""Pydantic model for codec configuration with validation"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Local imports
from json_overflow.core.domain.locator import DEFAULT_OVERFLOW_FIELD
from json_overflow.core.types.json import JSONDict

logger = getLogger(__name__)


class CodecConfig(BaseModel):
    """Options shared by decode and encode

    The same serialization options drive both the claimed-key computation on
    decode and the named-field output on encode, so the two always agree on
    which keys belong to the record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    overflow_field: str = Field(
        DEFAULT_OVERFLOW_FIELD, description="Name of the record field holding unknown keys"
    )
    by_alias: bool = Field(True, description="Serialize named fields by their alias")
    exclude_none: bool = Field(False, description="Omit named fields whose value is None")
    exclude_defaults: bool = Field(
        False,
        description=(
            "Omit named fields still at their default value. A decoded key holding the"
            " default is then left in overflow, so changing that field before encoding"
            " raises AliasedFieldError"
        ),
    )
    sort_keys: bool = Field(True, description="Emit encoded keys in sorted order")

    @field_validator("overflow_field")
    @classmethod
    def validate_overflow_field(cls, v: str) -> str:
        """Ensure the field name is a usable Python identifier"""
        if not v.isidentifier():
            raise ValueError(f"overflow_field must be an identifier, got {v!r}")
        return v

    def dump_options(self) -> dict[str, bool]:
        """Keyword arguments for model_dump_json"""
        return {
            "by_alias": self.by_alias,
            "exclude_none": self.exclude_none,
            "exclude_defaults": self.exclude_defaults,
        }

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "CodecConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated CodecConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None or not config_path.exists():
            if config_path is not None:
                logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data: JSONDict = json.load(f)
            return cls.model_validate(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()
