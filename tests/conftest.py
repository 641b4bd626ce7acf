"""Pytest configuration and fixtures."""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment variables
os.environ["LOG_LEVEL"] = "INFO"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="enumerations-logs-")
os.environ["LOG_INVALID_CAPTURES"] = "true"


@pytest_asyncio.fixture
async def client():
    """HTTP client bound to the application, no network involved."""
    from enumerations.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def applicant_payload() -> dict:
    """A quote applicant as a partner would send it, with one bad value per block."""
    return {
        "gender": "f",
        "maritalStatus": "S",
        "driver": {
            "incident": "atfault",
            "discount": "nonesuch",
        },
        "vehicle": {
            "ownership": "PaidOff",
            "mileage": "TooMuch",
        },
    }
