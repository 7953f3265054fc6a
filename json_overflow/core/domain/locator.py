# json_overflow/core/domain/locator.py

"""Locate and validate the overflow field of a record

A record is any pydantic model instance declaring exactly one field like::

    overflow: dict[str, msgspec.Raw] = Field(default_factory=dict, exclude=True)

The field is validated on every call rather than once per type, so a record
that breaks the contract fails each decode/encode with a descriptive error.
"""

# Standard library imports
from typing import TypeAliasType
from typing import get_args
from typing import get_origin

# Third party imports
from msgspec import Raw
from pydantic import BaseModel

# Local imports
from json_overflow.core.domain.errors import MissingOverflowFieldError
from json_overflow.core.domain.errors import NotAStructError
from json_overflow.core.domain.errors import WrongOverflowTypeError
from json_overflow.core.types.json import OverflowMap

DEFAULT_OVERFLOW_FIELD = "overflow"


def _unwrap_alias(annotation: object) -> object:
    """Resolve `type X = ...` aliases down to the aliased annotation"""
    while isinstance(annotation, TypeAliasType):
        annotation = annotation.__value__
    return annotation


def _is_overflow_annotation(annotation: object) -> bool:
    annotation = _unwrap_alias(annotation)
    if get_origin(annotation) is not dict:
        return False
    args = get_args(annotation)
    if len(args) != 2:
        return False
    key_type, value_type = (_unwrap_alias(arg) for arg in args)
    return key_type is str and value_type is Raw


class OverflowField:
    """Handle on a validated overflow field of one record instance"""

    def __init__(self, record: BaseModel, name: str):
        self.record = record
        self.name = name

    def reset(self) -> OverflowMap:
        """Replace the field with a fresh empty map and return the stored map

        Written to the instance __dict__ like model_construct does, so frozen
        records can be reset too. Populating the returned dict in place
        populates the record.
        """
        overflow: OverflowMap = {}
        self.record.__dict__[self.name] = overflow
        self.record.__pydantic_fields_set__.add(self.name)
        return overflow

    def get(self) -> OverflowMap:
        """Current overflow map; None is read as empty"""
        overflow = getattr(self.record, self.name)
        if overflow is None:
            return {}
        return overflow

    @property
    def input_names(self) -> set[str]:
        """JSON keys pydantic would route into the overflow field on validation"""
        field_info = type(self.record).model_fields[self.name]
        names = {self.name}
        for alias in (field_info.alias, field_info.validation_alias):
            if isinstance(alias, str):
                names.add(alias)
        return names

    def __repr__(self) -> str:
        return f"OverflowField({type(self.record).__name__}.{self.name})"


def locate(record: object, field_name: str | None = None) -> OverflowField:
    """Find and validate the overflow field of a record

    Args:
        record: Pydantic model instance to inspect
        field_name: Name of the overflow field, "overflow" if None

    Returns:
        OverflowField handle for the record

    Raises:
        NotAStructError: record is not a pydantic model instance
        MissingOverflowFieldError: the model declares no such field
        WrongOverflowTypeError: wrong annotation or missing exclude=True
    """
    name = field_name or DEFAULT_OVERFLOW_FIELD

    if not isinstance(record, BaseModel):
        raise NotAStructError(record)

    model = type(record)
    field_info = model.model_fields.get(name)
    if field_info is None:
        raise MissingOverflowFieldError(model, name)

    if not _is_overflow_annotation(field_info.annotation):
        raise WrongOverflowTypeError(model, name, f"annotated as {field_info.annotation!r}")

    # Part of the field's contract, not a separate error kind
    if field_info.exclude is not True:
        raise WrongOverflowTypeError(model, name, "field is not excluded from output")

    return OverflowField(record, name)
