"""Field-walker: audit a record for capturing identifiers holding invalid values."""

import dataclasses
import types
from typing import Annotated, Any, Optional, Union, get_args, get_origin, get_type_hints

from loguru import logger
from pydantic import BaseModel

from enumerations.core.errors import MustBeRecordError

# methods shared by every capturing identifier type
VALIDATED_ID_METHODS = (
    "captured_value",
    "to_id_string",
    "valid",
    "marshal_json",
    "unmarshal_json",
)


def is_validated_id(value: Any) -> bool:
    """Return True if ``value`` (an instance or a class) behaves like a ValidatedID."""
    return all(callable(getattr(value, name, None)) for name in VALIDATED_ID_METHODS)


def is_record(value: Any) -> bool:
    """Return True for pydantic model instances and dataclass instances."""
    if isinstance(value, BaseModel):
        return True

    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _declares_validated_id(annotation: Any) -> bool:
    if get_origin(annotation) is Annotated:
        return _declares_validated_id(get_args(annotation)[0])

    if get_origin(annotation) in (Union, types.UnionType):
        return any(_declares_validated_id(arg) for arg in get_args(annotation))

    return isinstance(annotation, type) and is_validated_id(annotation)


def _record_fields(record: Any) -> list[tuple[str, Any, Any]]:
    """Return ``(name, value, annotation)`` for each field in declared order."""
    if isinstance(record, BaseModel):
        return [
            (name, getattr(record, name, None), field_info.annotation)
            for name, field_info in type(record).model_fields.items()
        ]

    try:
        hints = get_type_hints(type(record))
    except NameError:
        # unresolvable forward references; absent fields cannot be classified
        hints = {}

    return [
        (f.name, getattr(record, f.name, None), hints.get(f.name))
        for f in dataclasses.fields(record)
    ]


def _walk(record: Any) -> dict[str, Optional[str]]:
    rtn: dict[str, Optional[str]] = {}

    for name, value, annotation in _record_fields(record):
        # an unset optional capturing identifier is reported with no captured value
        if value is None:
            if _declares_validated_id(annotation):
                rtn[name] = None
            continue

        if is_validated_id(value) and not isinstance(value, type):
            if not value.valid():
                rtn[name] = value.captured_value()
            continue

        if is_record(value):
            for sub_name, sub_value in _walk(value).items():
                rtn[f"{name}.{sub_name}"] = sub_value

    return rtn


def validate_fields(record: Any) -> dict[str, Optional[str]]:
    """Report every capturing-identifier field of ``record`` that is not valid.

    Nested records (pydantic models or dataclasses) are walked recursively and
    their entries are keyed by dotted field path. Other field values are
    skipped.

    Args:
        record: A pydantic model instance or dataclass instance

    Returns:
        Mapping of dotted field path to the raw captured value

    Raises:
        MustBeRecordError: If ``record`` is not a record instance
    """
    if not is_record(record):
        raise MustBeRecordError()

    rtn = _walk(record)
    if rtn:
        logger.debug(f"validate_fields | record={type(record).__name__} | invalid={rtn}")

    return rtn
