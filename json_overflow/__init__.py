# json_overflow/__init__.py

"""Lossless partial JSON deserialization

Decode JSON objects into pydantic records while keeping every key the record
does not declare, byte-for-byte, in an overflow map, so that encoding the
record again reproduces those keys unchanged.
"""

# Local imports
# Codec
from json_overflow.application.codec import claimed_keys
from json_overflow.application.codec import decode
from json_overflow.application.codec import encode

# Errors
from json_overflow.core.domain.errors import AliasedFieldError
from json_overflow.core.domain.errors import MissingOverflowFieldError
from json_overflow.core.domain.errors import NotAStructError
from json_overflow.core.domain.errors import OverflowCodecError
from json_overflow.core.domain.errors import OverflowContractError
from json_overflow.core.domain.errors import ParseError
from json_overflow.core.domain.errors import WrongOverflowTypeError

# Overflow field access
from json_overflow.core.domain.locator import OverflowField
from json_overflow.core.domain.locator import locate
from json_overflow.core.types.json import OverflowMap

# Infrastructure
from json_overflow.infrastructure.config import CodecConfig
from json_overflow.infrastructure.config import get_config
from json_overflow.infrastructure.logging import setup_logging

# Record base class
from json_overflow.shared.mixins import OverflowModel

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Codec
    "decode",
    "encode",
    "claimed_keys",
    # Records
    "OverflowModel",
    "OverflowField",
    "OverflowMap",
    "locate",
    # Errors
    "OverflowCodecError",
    "OverflowContractError",
    "NotAStructError",
    "MissingOverflowFieldError",
    "WrongOverflowTypeError",
    "ParseError",
    "AliasedFieldError",
    # Infrastructure
    "CodecConfig",
    "get_config",
    "setup_logging",
    # Version
    "__version__",
]
