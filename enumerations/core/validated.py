"""Capturing enumeration identifiers.

A ``ValidatedID`` replaces a plain identifier in documents produced by less
disciplined peers. Decoding never fails: an unrecognized value is kept as the
captured raw string and an ``UnmarshalInvalidIDError`` is appended to
``errors``, so the surrounding parse succeeds and the bad value can be audited
afterwards with ``validate_fields``.
"""

import json
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from loguru import logger
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from enumerations.core.errors import UnmarshalInvalidIDError
from enumerations.core.identifier import EnumID, ids_equal

if TYPE_CHECKING:
    from enumerations.core.catalog import EnumItem


def _raw_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value)
    except TypeError:
        return str(value)


class ValidatedID:
    """Wrapper around an ``EnumID`` that captures invalid input instead of failing.

    Subclasses name their identifier type in the class statement::

        class ValidatedGenderID(ValidatedID, id_type=GenderID):
            ...

    Attributes:
        errors: Errors collected while decoding into this value
    """

    __slots__ = ("_id", "_captured_value", "errors")

    id_type: ClassVar[type[EnumID]]

    def __init_subclass__(cls, id_type: Optional[type[EnumID]] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if id_type is not None:
            cls.id_type = id_type
            id_type.validated_type = cls

    def __init__(self, value: Optional[Union[EnumID, str]] = None):
        self._id: Optional[EnumID] = None
        self._captured_value: Optional[str] = None
        self.errors: list[Exception] = []

        if value is not None:
            self._id = self.id_type(value).id()

    @classmethod
    def capture(cls, value: Any) -> "ValidatedID":
        """Build a new value by decoding an already-parsed JSON value or text."""
        if isinstance(value, cls):
            return value.copy()

        rtn = cls()
        if isinstance(value, ValidatedID):
            value = value.captured_value() or value.to_id_string()
        rtn._capture(value)
        return rtn

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "ValidatedID":
        """Decode raw JSON text into a new value. Never raises."""
        rtn = cls()
        rtn.unmarshal_json(data)
        return rtn

    @classmethod
    def from_xml(cls, text: Optional[str]) -> "ValidatedID":
        """Decode XML element text into a new value. Never raises."""
        rtn = cls()
        rtn.unmarshal_xml(text)
        return rtn

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"captured_value={self._captured_value!r}, errors={len(self.errors)})"
        )

    def __str__(self) -> str:
        return self.to_id_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedID):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def captured_value(self) -> Optional[str]:
        """Return the raw text most recently decoded into this value, if any."""
        return self._captured_value

    def clone(self) -> "ValidatedID":
        """Copy the identifier only; the captured value and errors are not copied."""
        return type(self)(self._id)

    def copy(self) -> "ValidatedID":
        """Copy the identifier, the captured value and the collected errors."""
        rtn = type(self)()
        rtn._id = self._id
        rtn._captured_value = self._captured_value
        rtn.errors = list(self.errors)
        return rtn

    def equals(self, other: Optional["ValidatedID"]) -> bool:
        """Return True if and only if both values hold the same identifier."""
        if other is None:
            return False

        return ids_equal(self._id, other._id)

    def id(self) -> Optional[EnumID]:
        """Return the identifier if it is valid, otherwise None."""
        if self._id is not None:
            return self._id.id()

        return None

    def item(self) -> Optional["EnumItem"]:
        """Return the catalog item for the contained identifier, if any."""
        if self._id is not None:
            return self._id.item()

        return None

    def to_id_string(self) -> str:
        """Return the canonical id, or "" if this value is not valid."""
        if self._id is not None:
            return self._id.to_id_string()

        return ""

    def valid(self) -> bool:
        """Return True if and only if this value holds a recognized identifier."""
        if self._id is None:
            return False

        return self._id.valid()

    def validated_id(self) -> "ValidatedID":
        """Return a copy of the contained identifier as a new capturing value."""
        return self.clone()

    # --- capturing codec ------------------------------------------------

    def _capture(self, value: Any) -> None:
        if value is None:
            self._id = None
            self._captured_value = None
            return

        self._unmarshal_value(_raw_text(value))

    def _unmarshal_value(self, raw: str) -> None:
        captured = raw.strip('"')
        self._id = None
        self._captured_value = captured

        # empty input is invalid, but not an error
        if not captured:
            return

        item = self.id_type.catalog().by_id_string(captured)
        if item is None:
            logger.debug(f"{type(self).__name__} captured unknown value {captured!r}")
            self.errors.append(UnmarshalInvalidIDError())
            return

        self._id = item.id

    def unmarshal_json(self, data: Union[str, bytes]) -> None:
        """Decode raw JSON text into this value. Never raises."""
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        try:
            value = json.loads(text)
        except ValueError:
            value = text.strip()

        self._capture(value)

    def unmarshal_xml(self, text: Optional[str]) -> None:
        """Decode XML element text into this value. Never raises."""
        self._unmarshal_value(text or "")

    def marshal_json(self) -> str:
        """Encode as a JSON string holding the canonical id, or ``null`` when not valid."""
        if self._id is None:
            return "null"

        return self._id.marshal_json()

    def marshal_xml(self) -> str:
        """Encode as XML element text: the canonical id, or "" when not valid."""
        if self._id is None:
            return ""

        return self._id.marshal_xml()

    @staticmethod
    def _serialize(value: Optional["ValidatedID"]) -> Optional[str]:
        if value is None or value._id is None:
            return None

        return value._id._encode(value._id)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.capture,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize,
                return_schema=core_schema.nullable_schema(core_schema.str_schema()),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"anyOf": [{"type": "string"}, {"type": "null"}]}
