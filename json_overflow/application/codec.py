# json_overflow/application/codec.py

"""Decode and encode records while preserving unknown JSON keys

Decoding parses the input twice, once into a generic key -> raw value map and
once into the record's typed fields. The keys the record claims are learned by
re-serializing the record and reading back its top-level keys; everything else
stays in the overflow map exactly as it appeared in the input.

Encoding serializes the named fields the same way and merges the overflow map
into the result, refusing any overflow key that a named field also produces.
"""

# Standard library imports
from logging import getLogger

# Third party imports
from msgspec import DecodeError
from msgspec import Raw
from msgspec import ValidationError as MsgspecValidationError
from msgspec import json as msgspec_json
from pydantic import BaseModel

# Local imports
from json_overflow.core.domain.errors import AliasedFieldError
from json_overflow.core.domain.errors import ParseError
from json_overflow.core.domain.locator import locate
from json_overflow.core.types.json import OverflowMap
from json_overflow.core.types.protocols import OverflowHandle
from json_overflow.infrastructure.config import CodecConfig
from json_overflow.infrastructure.config import get_config

logger = getLogger(__name__)

_raw_map_decoder = msgspec_json.Decoder(dict[str, Raw])


def _parse_raw_map(data: bytes | str) -> OverflowMap:
    """Parse a JSON object into top-level keys mapped to raw values

    Raises:
        ParseError: data is not valid JSON or not a JSON object
    """
    try:
        return _raw_map_decoder.decode(data)
    except (DecodeError, MsgspecValidationError) as e:
        raise ParseError(f"Invalid JSON object: {e}") from e


def _named_fields_json(record: BaseModel, config: CodecConfig) -> bytes:
    """Serialize the record's named fields; the overflow field is excluded by its directive"""
    return record.model_dump_json(**config.dump_options()).encode("utf-8")


def claimed_keys(record: BaseModel, config: CodecConfig | None = None) -> set[str]:
    """Top-level keys the record's named fields serialize to

    Args:
        record: Pydantic model instance
        config: Codec configuration, default if None

    Returns:
        Set of JSON keys owned by named fields
    """
    config = config or get_config()
    return set(_parse_raw_map(_named_fields_json(record, config)))


def _assign_named_fields(target: BaseModel, parsed: BaseModel, overflow_field: str) -> None:
    """Copy validated state from parsed onto target, as model_construct would

    Values are written to __dict__ directly: they are already validated, and
    frozen fields must still be populated. Extras and the fields-set are
    replaced so nothing from a previous decode survives.
    """
    for name in type(target).model_fields:
        if name == overflow_field:
            continue
        target.__dict__[name] = parsed.__dict__[name]

    extra = parsed.__pydantic_extra__
    object.__setattr__(target, "__pydantic_extra__", dict(extra) if extra is not None else None)
    object.__setattr__(
        target, "__pydantic_fields_set__", set(parsed.model_fields_set) | {overflow_field}
    )


def decode(data: bytes | str, target: BaseModel, config: CodecConfig | None = None) -> None:
    """Parse JSON into a record, keeping unrecognized keys in its overflow field

    Behaves like the record's own JSON validation, except every top-level key
    not claimed by a named field is stored verbatim in the overflow map.

    Args:
        data: JSON document whose top level is an object
        target: Record instance to populate in place
        config: Codec configuration, default if None

    Raises:
        OverflowContractError: target does not satisfy the overflow contract
        ParseError: data is not a JSON object
        pydantic.ValidationError: named fields failed validation

    On failure the target may be left partially populated.
    """
    config = config or get_config()
    handle: OverflowHandle = locate(target, config.overflow_field)

    overflow = handle.reset()
    raw_map = _parse_raw_map(data)
    for key, raw in raw_map.items():
        # Detach from the input buffer
        overflow[key] = raw.copy()

    # A key spelled like the overflow field is unknown data, not field input
    shadowed = handle.input_names & raw_map.keys()
    if shadowed:
        data = msgspec_json.encode({k: v for k, v in raw_map.items() if k not in shadowed})

    parsed = type(target).model_validate_json(data)
    _assign_named_fields(target, parsed, config.overflow_field)

    claimed = claimed_keys(target, config)
    for key in claimed:
        overflow.pop(key, None)

    logger.debug(
        f"Decoded {type(target).__name__}: {len(claimed)} named keys, "
        f"{len(overflow)} overflow keys"
    )


def encode(record: BaseModel, config: CodecConfig | None = None) -> bytes:
    """Serialize a record with its overflow keys merged into the output

    Args:
        record: Record instance to serialize, not modified
        config: Codec configuration, default if None

    Returns:
        JSON object bytes holding the named fields and every overflow key

    Raises:
        OverflowContractError: record does not satisfy the overflow contract
        AliasedFieldError: an overflow key duplicates a named field's key
    """
    config = config or get_config()
    handle: OverflowHandle = locate(record, config.overflow_field)

    result = _parse_raw_map(_named_fields_json(record, config))
    named_count = len(result)

    for key, raw in handle.get().items():
        if key in result:
            raise AliasedFieldError(key)
        result[key] = raw

    logger.debug(
        f"Encoded {type(record).__name__}: {named_count} named keys, "
        f"{len(result) - named_count} overflow keys"
    )

    return msgspec_json.encode(result, order="sorted" if config.sort_keys else None)
