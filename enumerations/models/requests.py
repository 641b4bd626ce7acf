"""Request models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    """Request to validate raw values against one catalog.

    Attributes:
        values: Raw values as received from a partner; strings are expected
            but other JSON scalars are captured as their JSON text
    """

    values: list[Any] = Field(
        ...,
        min_length=1,
        description="Raw values to decode through the capturing codec",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"values": ["M", "f", "X"]},
                {"values": ["atfault", "fender-bender"]},
            ]
        }
    }
