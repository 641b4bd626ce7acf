"""Error taxonomy for the enumeration framework."""

ERROR_MARSHAL_INVALID_ID = "attempted to marshal invalid enumeration ID value"
ERROR_UNMARSHAL_INVALID_ID = "attempted to unmarshal an invalid enumeration ID value"
ERROR_MUST_BE_RECORD = "argument must be a record instance"


class EnumerationError(Exception):
    """Base class for all enumeration framework errors."""


class MarshalInvalidIDError(EnumerationError, ValueError):
    """Raised when a non-empty identifier missing from its catalog is encoded."""

    def __init__(self, message: str = ERROR_MARSHAL_INVALID_ID):
        super().__init__(message)


class UnmarshalInvalidIDError(EnumerationError, ValueError):
    """Raised when a strict decode sees a non-empty unknown identifier.

    Capturing identifiers append this error to their ``errors`` list instead
    of raising it.
    """

    def __init__(self, message: str = ERROR_UNMARSHAL_INVALID_ID):
        super().__init__(message)


class MustBeRecordError(EnumerationError, TypeError):
    """Raised by the field-walker when its argument is not a record."""

    def __init__(self, message: str = ERROR_MUST_BE_RECORD):
        super().__init__(message)


class CatalogDefinitionError(EnumerationError, ValueError):
    """Raised while building a catalog whose definition breaks an invariant."""
