"""API v1 router configuration."""

from fastapi import APIRouter

from enumerations.api.v1.endpoints import catalogs, health

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    catalogs.router,
    tags=["enumerations"],
)

api_router.include_router(
    health.router,
    tags=["health"],
)
