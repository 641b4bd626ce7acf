"""Enumeration catalog endpoints."""

from fastapi import APIRouter, HTTPException
from loguru import logger

from enumerations.core.catalog import Enumeration
from enumerations.models import (
    CatalogListResponse,
    CatalogResponse,
    ItemModel,
    ValidateRequest,
    ValidateResponse,
)
from enumerations.services import EnumerationService

router = APIRouter(prefix="/enumerations")


def _require_catalog(name: str) -> Enumeration:
    catalog = EnumerationService.find_catalog(name)
    if catalog is None:
        raise HTTPException(status_code=404, detail=f"Unknown enumeration: {name}")

    return catalog


@router.get("", response_model=CatalogListResponse)
async def list_enumerations() -> CatalogListResponse:
    """List every available enumeration with its item count."""
    return CatalogListResponse(catalogs=EnumerationService.list_catalogs())


@router.get("/{name}", response_model=CatalogResponse)
async def get_enumeration(name: str) -> CatalogResponse:
    """Get the full contents of one enumeration.

    Args:
        name: Catalog name, case-insensitive (``gender`` or ``EnumGender``)

    Returns:
        Catalog description and its items in insertion order

    Raises:
        HTTPException: 404 if the enumeration does not exist
    """
    catalog = _require_catalog(name)
    return EnumerationService.describe_catalog(catalog)


@router.get("/{name}/items/{item_id}", response_model=ItemModel)
async def get_enumeration_item(name: str, item_id: str) -> ItemModel:
    """Look up one item by id.

    Lookup ignores case and accepts aliases; the response always carries the
    canonical id.

    Raises:
        HTTPException: 404 if the enumeration or the item does not exist
    """
    catalog = _require_catalog(name)

    item = EnumerationService.find_item(catalog, item_id)
    if item is None:
        raise HTTPException(
            status_code=404, detail=f"Unknown {catalog.name} id: {item_id}"
        )

    return EnumerationService.to_item_model(item)


@router.post("/{name}/validate", response_model=ValidateResponse)
async def validate_values(name: str, request: ValidateRequest) -> ValidateResponse:
    """Validate raw values against one enumeration.

    Each value is decoded the way a capturing field would decode it: unknown
    values never fail the request, they are reported back with their errors.

    Args:
        name: Catalog name, case-insensitive
        request: Values to validate

    Returns:
        One result per value plus the number of invalid values

    Raises:
        HTTPException: 404 if the enumeration does not exist, 500 on failure
    """
    catalog = _require_catalog(name)

    try:
        logger.info(f"📋 /validate endpoint | enumeration={name} | count={len(request.values)}")

        response = EnumerationService.validate_values(catalog, request.values)

        logger.success(
            f"✓ /validate completed | enumeration={name} | invalid={response.invalid_count}"
        )
        return response

    except Exception as e:
        logger.error(f"✗ /validate failed: {e}")
        logger.exception("Full traceback:")
        raise HTTPException(status_code=500, detail=f"Validation failed: {str(e)}")
