# json_overflow/shared/mixins/mixins.py

"""Base class for records that keep their unknown JSON keys

Subclass OverflowModel and declare named fields as usual::

    class Person(OverflowModel):
        name: str = ""

    person = Person.from_json(b'{"name": "Bert", "age": 29}')
    person.overflow["age"]   # Raw(b'29')
    person.to_json()         # b'{"age":29,"name":"Bert"}'

Plain pydantic models work with decode/encode too, as long as they declare
the overflow field themselves.
"""

# Standard library imports
from typing import Self

# Third party imports
from msgspec import Raw
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from json_overflow.application.codec import decode
from json_overflow.application.codec import encode
from json_overflow.core.domain.locator import locate
from json_overflow.core.types.json import OverflowMap
from json_overflow.infrastructure.config import CodecConfig
from json_overflow.infrastructure.config import get_config


def _overflow_field(config: CodecConfig | None) -> str:
    return (config or get_config()).overflow_field


class OverflowModel(BaseModel):
    """Pydantic model with an overflow field for unrecognized keys"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    overflow: dict[str, Raw] = Field(default_factory=dict, exclude=True)

    @classmethod
    def from_json(cls, data: bytes | str, config: CodecConfig | None = None) -> Self:
        """Build a record from JSON, keeping unknown keys in overflow

        Args:
            data: JSON object
            config: Codec configuration, default if None

        Returns:
            Decoded record
        """
        record = cls.model_construct()
        decode(data, record, config)
        return record

    def to_json(self, config: CodecConfig | None = None) -> bytes:
        """Serialize named fields and overflow keys together"""
        return encode(self, config)

    def reset_overflow(self, config: CodecConfig | None = None) -> OverflowMap:
        """Replace overflow with an empty map and return it"""
        return locate(self, _overflow_field(config)).reset()

    def get_overflow(self, config: CodecConfig | None = None) -> OverflowMap:
        """Current overflow map, read without mutation"""
        return locate(self, _overflow_field(config)).get()
