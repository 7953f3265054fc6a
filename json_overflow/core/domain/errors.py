# json_overflow/core/domain/errors.py

"""Exceptions raised by the overflow codec

All of these are permanent: they signal malformed input or a record type
that breaks the overflow contract, never a transient condition.
"""


class OverflowCodecError(Exception):
    """Base class for every error raised by json_overflow"""


class OverflowContractError(OverflowCodecError, TypeError):
    """The record type does not satisfy the overflow field contract"""


class NotAStructError(OverflowContractError):
    """Target is not a record (pydantic model instance)"""

    def __init__(self, value: object):
        self.value_type = type(value)
        super().__init__(f"Expected a pydantic model instance, got {self.value_type.__name__}")


class MissingOverflowFieldError(OverflowContractError):
    """Record declares no overflow field"""

    def __init__(self, model: type, field_name: str):
        self.model = model
        self.field_name = field_name
        super().__init__(f"{model.__name__} has no '{field_name}' field")


class WrongOverflowTypeError(OverflowContractError):
    """Overflow field has the wrong annotation or is not excluded from output"""

    def __init__(self, model: type, field_name: str, reason: str):
        self.model = model
        self.field_name = field_name
        self.reason = reason
        super().__init__(
            f"{model.__name__}.{field_name} must be dict[str, msgspec.Raw] "
            f"declared with Field(exclude=True): {reason}"
        )


class ParseError(OverflowCodecError, ValueError):
    """Input is not valid JSON, or not a JSON object where one is required"""


class AliasedFieldError(OverflowCodecError, ValueError):
    """An overflow key duplicates a key produced by a named field"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Named field present in overflow: '{key}'")
