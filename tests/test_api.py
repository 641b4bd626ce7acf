"""API endpoint tests."""

import pytest

from enumerations.core.errors import ERROR_UNMARSHAL_INVALID_ID


class TestMetadataEndpoints:
    """Test root and health endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert data["catalog_count"] == 13

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["api_prefix"] == "/api/v1"


class TestCatalogEndpoints:
    """Test catalog browsing and lookup endpoints."""

    @pytest.mark.asyncio
    async def test_list_enumerations(self, client):
        response = await client.get("/api/v1/enumerations")
        assert response.status_code == 200
        catalogs = {c["name"]: c for c in response.json()["catalogs"]}
        assert len(catalogs) == 13
        assert catalogs["Gender"] == {"name": "Gender", "description": "genders", "item_count": 2}
        assert catalogs["Incident"]["item_count"] == 30

    @pytest.mark.asyncio
    async def test_get_enumeration(self, client):
        response = await client.get("/api/v1/enumerations/gender")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Gender"
        assert data["enumeration"] == "EnumGender"
        assert data["items"][0] == {
            "Value": "M",
            "Description": "Male",
            "Name": "Male",
            "SortOrder": 1,
            "Meta": {},
        }

    @pytest.mark.asyncio
    async def test_get_enumeration_by_full_name(self, client):
        response = await client.get("/api/v1/enumerations/EnumDiscount")
        assert response.status_code == 200
        items = response.json()["items"]
        assert len(items) == 23
        assert items[0]["Value"] == "earlybird"
        assert set(items[0]["Meta"]) == {"StateCodes"}

    @pytest.mark.asyncio
    async def test_unknown_enumeration(self, client):
        response = await client.get("/api/v1/enumerations/colors")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_get_item_by_alias(self, client):
        response = await client.get("/api/v1/enumerations/incident/items/ATFAULT")
        assert response.status_code == 200
        data = response.json()
        assert data["Value"] == "AtFaultAccident"
        assert data["Meta"]["Classification"] == "AFA"

    @pytest.mark.asyncio
    async def test_get_item_ignores_case(self, client):
        response = await client.get("/api/v1/enumerations/state/items/va")
        assert response.status_code == 200
        assert response.json()["Value"] == "VA"

    @pytest.mark.asyncio
    async def test_unknown_item(self, client):
        response = await client.get("/api/v1/enumerations/gender/items/X")
        assert response.status_code == 404


class TestValidateEndpoint:
    """Test batch validation through the capturing codec."""

    @pytest.mark.asyncio
    async def test_validate_values(self, client):
        response = await client.post(
            "/api/v1/enumerations/gender/validate",
            json={"values": ["M", "f", "X", ""]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["enumeration"] == "Gender"
        assert data["invalid_count"] == 2

        results = data["results"]
        assert results[0] == {"value": "M", "valid": True, "canonical_id": "M", "errors": []}
        assert results[1]["canonical_id"] == "F"
        assert results[2] == {
            "value": "X",
            "valid": False,
            "canonical_id": None,
            "errors": [ERROR_UNMARSHAL_INVALID_ID],
        }
        assert results[3] == {"value": "", "valid": False, "canonical_id": None, "errors": []}

    @pytest.mark.asyncio
    async def test_validate_alias(self, client):
        response = await client.post(
            "/api/v1/enumerations/incident/validate",
            json={"values": ["notatfault"]},
        )
        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["valid"] is True
        assert result["canonical_id"] == "NonChargeableAccident"
        assert result["value"] == "notatfault"

    @pytest.mark.asyncio
    async def test_validate_non_string_and_null(self, client):
        response = await client.post(
            "/api/v1/enumerations/stopquotereason/validate",
            json={"values": [1011, None]},
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert results[0]["value"] == "1011"
        assert results[0]["valid"] is True
        assert results[1] == {"value": None, "valid": False, "canonical_id": None, "errors": []}

    @pytest.mark.asyncio
    async def test_validate_requires_values(self, client):
        response = await client.post("/api/v1/enumerations/gender/validate", json={"values": []})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_validate_unknown_enumeration(self, client):
        response = await client.post("/api/v1/enumerations/colors/validate", json={"values": ["x"]})
        assert response.status_code == 404
