"""Application services."""

from enumerations.services.enumeration_service import EnumerationService

__all__ = [
    "EnumerationService",
]
