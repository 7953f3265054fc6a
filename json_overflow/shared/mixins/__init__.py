# json_overflow/shared/mixins/__init__.py

"""Shared base classes for overflow-aware records"""

# Local imports
from json_overflow.shared.mixins.mixins import OverflowModel

__all__ = ["OverflowModel"]
