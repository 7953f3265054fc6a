# json_overflow/core/types/protocols.py

"""Protocol definitions for the overflow capability"""

# Standard library imports
from typing import Protocol
from typing import runtime_checkable

# Local imports
from json_overflow.core.types.json import OverflowMap


@runtime_checkable
class OverflowHandle(Protocol):
    """Read/reset access to a record's overflow map."""

    @property
    def input_names(self) -> set[str]: ...

    def reset(self) -> OverflowMap: ...
    def get(self) -> OverflowMap: ...
