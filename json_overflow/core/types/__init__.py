# json_overflow/core/types/__init__.py

"""Type definitions for json_overflow

Pure type aliases and protocols with no implementation logic.
"""

# Local imports
from json_overflow.core.types.json import JSONDict
from json_overflow.core.types.json import JSONList
from json_overflow.core.types.json import JSONPrimitive
from json_overflow.core.types.json import JSONType
from json_overflow.core.types.json import OverflowMap
from json_overflow.core.types.protocols import OverflowHandle

__all__ = [
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "OverflowHandle",
    "OverflowMap",
]
