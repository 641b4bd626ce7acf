"""Response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemModel(BaseModel):
    """Wire form of a single enumeration item.

    Attributes:
        value: Canonical id
        description: Human-facing description
        name: Programmer-facing stable token
        sort_order: Informational sort order
        meta: Item metadata
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "Value": "AtFaultAccident",
                    "Description": "Accident – At Fault",
                    "Name": "AccidentAtFault",
                    "SortOrder": 1,
                    "Meta": {"Category": "Accidents/Claims", "Classification": "AFA"},
                }
            ]
        },
    )

    value: str = Field(..., alias="Value", description="Canonical id")
    description: str = Field(..., alias="Description", description="Human-facing description")
    name: str = Field(..., alias="Name", description="Programmer-facing stable token")
    sort_order: int = Field(..., alias="SortOrder", description="Informational sort order")
    meta: dict[str, str] = Field(default_factory=dict, alias="Meta", description="Item metadata")


class CatalogSummary(BaseModel):
    """Summary of one catalog.

    Attributes:
        name: Short catalog name used in API paths
        description: Catalog description
        item_count: Number of items (aliases excluded)
    """

    name: str = Field(..., description="Short catalog name used in API paths")
    description: str = Field(..., description="Catalog description")
    item_count: int = Field(..., ge=1, description="Number of items")


class CatalogListResponse(BaseModel):
    """Response listing every catalog."""

    catalogs: list[CatalogSummary] = Field(..., description="Available catalogs")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "catalogs": [
                        {"name": "Gender", "description": "genders", "item_count": 2},
                        {"name": "LogLevel", "description": "log urgency levels", "item_count": 7},
                    ]
                }
            ]
        }
    }


class CatalogResponse(BaseModel):
    """Full contents of one catalog.

    Attributes:
        name: Short catalog name
        enumeration: Full catalog name (``EnumGender``)
        description: Catalog description
        items: Items in insertion order
    """

    name: str = Field(..., description="Short catalog name")
    enumeration: str = Field(..., description="Full catalog name")
    description: str = Field(..., description="Catalog description")
    items: list[ItemModel] = Field(..., description="Items in insertion order")


class CaptureResult(BaseModel):
    """Outcome of decoding one value through the capturing codec.

    Attributes:
        value: Raw text that was captured (quotes stripped)
        valid: Whether the value names an item
        canonical_id: Canonical id of the matched item
        errors: Decode errors collected for the value
    """

    value: Optional[str] = Field(default=None, description="Captured raw value")
    valid: bool = Field(..., description="Whether the value names an item")
    canonical_id: Optional[str] = Field(default=None, description="Canonical id if valid")
    errors: list[str] = Field(default_factory=list, description="Decode errors")


class ValidateResponse(BaseModel):
    """Response from validating a batch of values against one catalog."""

    enumeration: str = Field(..., description="Short catalog name")
    results: list[CaptureResult] = Field(..., description="One result per submitted value")
    invalid_count: int = Field(..., ge=0, description="Number of values that were not valid")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "enumeration": "Incident",
                    "results": [
                        {
                            "value": "atfault",
                            "valid": True,
                            "canonical_id": "AtFaultAccident",
                            "errors": [],
                        },
                        {
                            "value": "fender-bender",
                            "valid": False,
                            "canonical_id": None,
                            "errors": ["attempted to unmarshal an invalid enumeration ID value"],
                        },
                    ],
                    "invalid_count": 1,
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: Service status
        version: API version
        catalog_count: Number of loaded catalogs
    """

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    catalog_count: int = Field(..., description="Number of loaded catalogs")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes:
        error: Error message
        detail: Optional detailed error information
    """

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
