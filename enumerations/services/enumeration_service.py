"""Catalog lookups and batch capture validation used by the API."""

from typing import Any, Optional

from loguru import logger

from enumerations.catalogs import CATALOGS, get_catalog
from enumerations.core.catalog import EnumItem, Enumeration
from enumerations.core.config import settings
from enumerations.models import (
    CaptureResult,
    CatalogResponse,
    CatalogSummary,
    ItemModel,
    ValidateResponse,
)


def short_name(catalog: Enumeration) -> str:
    """Return the API name of a catalog (``EnumGender`` -> ``Gender``)."""
    return catalog.name.removeprefix("Enum")


class EnumerationService:
    """Service exposing the frozen catalogs and the capturing codec."""

    @staticmethod
    def list_catalogs() -> list[CatalogSummary]:
        """Summarize every registered catalog, sorted by name."""
        return [
            CatalogSummary(name=name, description=catalog.description, item_count=len(catalog))
            for name, catalog in sorted(CATALOGS.items())
        ]

    @staticmethod
    def find_catalog(name: str) -> Optional[Enumeration]:
        catalog = get_catalog(name)
        if catalog is None:
            logger.debug(f"Catalog lookup missed | name={name!r}")

        return catalog

    @staticmethod
    def to_item_model(item: EnumItem) -> ItemModel:
        return ItemModel(
            value=str(item.id),
            description=item.description,
            name=item.name,
            sort_order=item.sort_order,
            meta=dict(item.meta),
        )

    @staticmethod
    def describe_catalog(catalog: Enumeration) -> CatalogResponse:
        """Build the full wire form of a catalog."""
        return CatalogResponse(
            name=short_name(catalog),
            enumeration=catalog.name,
            description=catalog.description,
            items=[EnumerationService.to_item_model(item) for item in catalog],
        )

    @staticmethod
    def find_item(catalog: Enumeration, item_id: str) -> Optional[EnumItem]:
        """Look up one item by id or alias, ignoring case."""
        item = catalog.by_id_string(item_id)
        if item is None:
            logger.debug(f"Item lookup missed | catalog={catalog.name} | id={item_id!r}")

        return item

    @staticmethod
    def capture(catalog: Enumeration, raw: Any) -> CaptureResult:
        """Decode one raw value through the catalog's capturing identifier."""
        validated_type = catalog.id_type.validated_type
        if validated_type is None:
            raise TypeError(f"{catalog.name} has no validated identifier type")

        value = validated_type.capture(raw)
        return CaptureResult(
            value=value.captured_value(),
            valid=value.valid(),
            canonical_id=value.to_id_string() or None,
            errors=[str(error) for error in value.errors],
        )

    @staticmethod
    def validate_values(catalog: Enumeration, values: list[Any]) -> ValidateResponse:
        """Capture each value and report which ones name no item.

        Args:
            catalog: Catalog to validate against
            values: Raw values as received

        Returns:
            One result per value plus the number of invalid values
        """
        results = [EnumerationService.capture(catalog, raw) for raw in values]
        invalid = [result for result in results if not result.valid]

        if settings.log_invalid_captures:
            for result in invalid:
                logger.warning(
                    f"Invalid {short_name(catalog)} value captured | value={result.value!r}"
                )

        logger.info(
            f"Validated {len(results)} value(s) against {catalog.name} | invalid={len(invalid)}"
        )

        return ValidateResponse(
            enumeration=short_name(catalog),
            results=results,
            invalid_count=len(invalid),
        )

