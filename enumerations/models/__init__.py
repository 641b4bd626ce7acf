"""Data models for the application."""

from enumerations.models.requests import ValidateRequest
from enumerations.models.responses import (
    CaptureResult,
    CatalogListResponse,
    CatalogResponse,
    CatalogSummary,
    ErrorResponse,
    HealthResponse,
    ItemModel,
    ValidateResponse,
)

__all__ = [
    "ValidateRequest",
    "ItemModel",
    "CatalogSummary",
    "CatalogListResponse",
    "CatalogResponse",
    "CaptureResult",
    "ValidateResponse",
    "HealthResponse",
    "ErrorResponse",
]
