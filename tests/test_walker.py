"""Field-walker tests."""

from dataclasses import dataclass, field
from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field

from enumerations.catalogs.discount import ValidatedDiscountID
from enumerations.catalogs.gender import GenderID, ValidatedGenderID
from enumerations.catalogs.incident import ValidatedIncidentID
from enumerations.catalogs.marital_status import ValidatedMaritalStatusID
from enumerations.catalogs.vehicle_mileage import ValidatedVehicleMileageID
from enumerations.catalogs.vehicle_ownership import ValidatedVehicleOwnershipID
from enumerations.core.errors import ERROR_MUST_BE_RECORD, MustBeRecordError
from enumerations.core.walker import is_record, is_validated_id, validate_fields


class DriverBlock(BaseModel):
    incident: ValidatedIncidentID
    discount: ValidatedDiscountID


class VehicleBlock(BaseModel):
    ownership: ValidatedVehicleOwnershipID
    mileage: ValidatedVehicleMileageID


class Applicant(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    gender: ValidatedGenderID
    marital_status: ValidatedMaritalStatusID = Field(alias="maritalStatus")
    driver: DriverBlock
    vehicle: VehicleBlock
    notes: list[str] = Field(default_factory=list)


class StrictApplicant(BaseModel):
    gender: Optional[GenderID] = None
    discounts: list[ValidatedDiscountID] = Field(default_factory=list)


class OptionalApplicant(BaseModel):
    gender: Optional[ValidatedGenderID] = None
    name: Optional[str] = None


@dataclass
class DataclassDriver:
    gender: ValidatedGenderID
    incident: Optional[ValidatedIncidentID] = None
    tags: dict = field(default_factory=dict)


@dataclass
class DataclassPolicy:
    driver: DataclassDriver
    discount: ValidatedDiscountID


class DuckID:
    """Structurally a capturing identifier without inheriting from one."""

    def captured_value(self):
        return "duck"

    def to_id_string(self):
        return ""

    def valid(self):
        return False

    def marshal_json(self):
        return "null"

    def unmarshal_json(self, data):
        pass


@dataclass
class DuckRecord:
    value: DuckID


class TestValidateFields:
    """Test which fields the walker reports."""

    def test_nested_invalid_fields(self, applicant_payload):
        applicant = Applicant.model_validate(applicant_payload)
        assert validate_fields(applicant) == {
            "driver.discount": "nonesuch",
            "vehicle.mileage": "TooMuch",
        }

    def test_all_valid(self, applicant_payload):
        applicant_payload["driver"]["discount"] = "PIF"
        applicant_payload["vehicle"]["mileage"] = "less_than_4000"
        applicant = Applicant.model_validate(applicant_payload)
        assert validate_fields(applicant) == {}

    def test_declared_order(self, applicant_payload):
        applicant_payload["gender"] = "?"
        applicant = Applicant.model_validate(applicant_payload)
        assert list(validate_fields(applicant)) == ["gender", "driver.discount", "vehicle.mileage"]

    def test_empty_values_are_reported(self, applicant_payload):
        applicant_payload["maritalStatus"] = ""
        applicant = Applicant.model_validate(applicant_payload)
        assert validate_fields(applicant)["marital_status"] == ""

    def test_unset_optional_is_reported_as_none(self):
        assert validate_fields(OptionalApplicant()) == {"gender": None}
        assert validate_fields(OptionalApplicant(gender="F")) == {}

    def test_strict_fields_and_collections_are_skipped(self):
        record = StrictApplicant.model_validate({"gender": "M", "discounts": ["bogus"]})
        assert validate_fields(record) == {}

    def test_dataclass_records(self):
        policy = DataclassPolicy(
            driver=DataclassDriver(gender=ValidatedGenderID.from_json('"Q"')),
            discount=ValidatedDiscountID.from_json('"online"'),
        )
        assert validate_fields(policy) == {
            "driver.gender": "Q",
            "driver.incident": None,
        }

    def test_structural_capability(self):
        assert validate_fields(DuckRecord(value=DuckID())) == {"value": "duck"}

    @pytest.mark.parametrize("value", [None, 5, "text", {"gender": "M"}, [1, 2], Applicant])
    def test_requires_record(self, value):
        with pytest.raises(MustBeRecordError) as exc_info:
            validate_fields(value)
        assert str(exc_info.value) == ERROR_MUST_BE_RECORD
        assert isinstance(exc_info.value, TypeError)


class TestPredicates:
    """Test the record and capability checks."""

    def test_is_record(self):
        assert is_record(OptionalApplicant())
        assert is_record(DuckRecord(value=DuckID()))
        assert not is_record(DuckRecord)
        assert not is_record({"a": 1})

    def test_is_validated_id(self):
        assert is_validated_id(ValidatedGenderID())
        assert is_validated_id(ValidatedGenderID)
        assert is_validated_id(DuckID())
        assert not is_validated_id(GenderID("M"))
