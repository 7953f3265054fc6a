# json_overflow/core/types/json.py

"""JSON type definitions for raw and decoded JSON values"""

# Third party imports
from msgspec import Raw

# JSON Type Usage Guide:
# - JSONDict / JSONType: decoded values (config files)
# - OverflowMap: unknown top-level keys of a record mapped to their raw values,
#   each value the exact source bytes of one JSON value

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

type OverflowMap = dict[str, Raw]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList", "OverflowMap"]
