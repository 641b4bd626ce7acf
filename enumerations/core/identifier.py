"""Strict enumeration identifiers.

Every enumeration declares its own ``EnumID`` subclass (``GenderID``,
``DiscountID``, ...). The subclass is bound to its catalog when the catalog is
built, after which the identifier can answer membership questions and apply
the strict JSON/XML codec: unknown values are rejected with an error instead
of being captured.
"""

import json
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypeVar, Union

from loguru import logger
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from enumerations.core.errors import MarshalInvalidIDError, UnmarshalInvalidIDError

if TYPE_CHECKING:
    from enumerations.core.catalog import EnumItem, Enumeration
    from enumerations.core.validated import ValidatedID

IDT = TypeVar("IDT", bound="EnumID")


def ids_equal(i: Optional["EnumID"], j: Optional["EnumID"]) -> bool:
    """Return True if and only if two identifiers are equivalent.

    Two absent identifiers are equal, an absent identifier never equals a
    present one, and present identifiers compare as exact (case-sensitive)
    strings.
    """
    if i is None and j is None:
        return True

    if i is None or j is None:
        return False

    return str(i) == str(j)


class EnumID(str):
    """Textual identifier of one item in a specific enumeration."""

    __slots__ = ()

    _catalog: ClassVar[Optional["Enumeration"]] = None
    validated_type: ClassVar[Optional[type["ValidatedID"]]] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    @classmethod
    def bind(cls, catalog: "Enumeration") -> None:
        """Attach this identifier type to its catalog. Called once by the builder."""
        cls._catalog = catalog

    @classmethod
    def catalog(cls) -> "Enumeration":
        """Return the catalog this identifier type belongs to."""
        if cls._catalog is None:
            raise RuntimeError(f"{cls.__name__} is not bound to a catalog")
        return cls._catalog

    def clone(self: IDT) -> IDT:
        """Create an independent copy of this identifier."""
        return type(self)(self)

    def equals(self, other: Optional["EnumID"]) -> bool:
        """Return True if and only if ``other`` is the same identifier."""
        return ids_equal(self, other)

    def id(self: IDT) -> Optional[IDT]:
        """Return a copy of this identifier if it is valid, otherwise None."""
        if self.valid():
            return self.clone()

        return None

    def item(self) -> Optional["EnumItem"]:
        """Return the catalog item this identifier names, if any."""
        if not self:
            return None

        return type(self).catalog().by_id_string(self)

    def to_id_string(self) -> str:
        """Return the textual form of this identifier, or "" if it is invalid."""
        if self and self.valid():
            return str(self)

        return ""

    def valid(self) -> bool:
        """Return True if and only if this identifier names a recognized item."""
        return self.item() is not None

    def validated_id(self) -> "ValidatedID":
        """Promote this identifier to its capturing wrapper type."""
        if self.validated_type is None:
            raise TypeError(f"{type(self).__name__} has no validated identifier type")

        return self.validated_type(self.id())

    # --- strict codec ---------------------------------------------------

    @classmethod
    def _encode(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None

        item = cls.catalog().by_id_string(value)
        if item is None:
            raise MarshalInvalidIDError()

        return str(item.id)

    @classmethod
    def _decode(cls: type[IDT], value: Optional[str]) -> Optional[IDT]:
        # empty input is absent, not an error
        if not value:
            return None

        item = cls.catalog().by_id_string(value)
        if item is None:
            logger.debug(f"{cls.__name__} rejected unknown value {value!r}")
            raise UnmarshalInvalidIDError()

        return item.id

    def marshal_json(self) -> str:
        """Encode as a JSON string holding the canonical id, or ``null`` when empty.

        Raises:
            MarshalInvalidIDError: If the identifier is non-empty and unknown
        """
        return json.dumps(self._encode(self))

    @classmethod
    def unmarshal_json(cls: type[IDT], data: Union[str, bytes]) -> Optional[IDT]:
        """Decode a JSON string into the canonical identifier.

        Returns:
            The canonical identifier, or None for ``""`` and ``null``

        Raises:
            UnmarshalInvalidIDError: If the string names no item
            TypeError: If the JSON value is not a string
        """
        value = json.loads(data)
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"cannot decode JSON {type(value).__name__} into {cls.__name__}"
            )

        return cls._decode(value)

    def marshal_xml(self) -> str:
        """Encode as XML element text: the canonical id, or "" when empty."""
        return self._encode(self) or ""

    @classmethod
    def unmarshal_xml(cls: type[IDT], text: Optional[str]) -> Optional[IDT]:
        """Decode XML element text with the same rules as JSON."""
        return cls._decode(text or "")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.nullable_schema(
            core_schema.no_info_after_validator_function(
                cls._decode, core_schema.str_schema()
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._encode,
                return_schema=core_schema.nullable_schema(core_schema.str_schema()),
            ),
        )
