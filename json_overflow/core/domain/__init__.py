# json_overflow/core/domain/__init__.py

"""Overflow field contract and its errors"""

# Local imports
from json_overflow.core.domain.errors import AliasedFieldError
from json_overflow.core.domain.errors import MissingOverflowFieldError
from json_overflow.core.domain.errors import NotAStructError
from json_overflow.core.domain.errors import OverflowCodecError
from json_overflow.core.domain.errors import OverflowContractError
from json_overflow.core.domain.errors import ParseError
from json_overflow.core.domain.errors import WrongOverflowTypeError
from json_overflow.core.domain.locator import DEFAULT_OVERFLOW_FIELD
from json_overflow.core.domain.locator import OverflowField
from json_overflow.core.domain.locator import locate

__all__ = [
    "AliasedFieldError",
    "DEFAULT_OVERFLOW_FIELD",
    "MissingOverflowFieldError",
    "NotAStructError",
    "OverflowCodecError",
    "OverflowContractError",
    "OverflowField",
    "ParseError",
    "WrongOverflowTypeError",
    "locate",
]
