"""Health check endpoint."""

from fastapi import APIRouter

from enumerations.catalogs import CATALOGS
from enumerations.models import HealthResponse

router = APIRouter()

API_VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns basic service status and the number of loaded catalogs.

    Returns:
        Health status with version and catalog count
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        catalog_count=len(CATALOGS),
    )
