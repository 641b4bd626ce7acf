"""Closed insurance enumerations with strict and capturing JSON/XML codecs."""

from loguru import logger

from enumerations.catalogs import CATALOGS, get_catalog
from enumerations.core.catalog import (
    AlternativeKeyIndex,
    CatalogBuilder,
    EnumItem,
    Enumeration,
    StateCodedItem,
)
from enumerations.core.errors import (
    ERROR_MARSHAL_INVALID_ID,
    ERROR_MUST_BE_RECORD,
    ERROR_UNMARSHAL_INVALID_ID,
    CatalogDefinitionError,
    EnumerationError,
    MarshalInvalidIDError,
    MustBeRecordError,
    UnmarshalInvalidIDError,
)
from enumerations.core.identifier import EnumID, ids_equal
from enumerations.core.validated import ValidatedID
from enumerations.core.walker import validate_fields

# applications opt in with logger.enable("enumerations")
logger.disable("enumerations")

__all__ = [
    "CATALOGS",
    "get_catalog",
    "AlternativeKeyIndex",
    "CatalogBuilder",
    "EnumItem",
    "Enumeration",
    "StateCodedItem",
    "ERROR_MARSHAL_INVALID_ID",
    "ERROR_MUST_BE_RECORD",
    "ERROR_UNMARSHAL_INVALID_ID",
    "CatalogDefinitionError",
    "EnumerationError",
    "MarshalInvalidIDError",
    "MustBeRecordError",
    "UnmarshalInvalidIDError",
    "EnumID",
    "ids_equal",
    "ValidatedID",
    "validate_fields",
]
