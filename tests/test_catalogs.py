"""Catalog data and helper tests."""

import pytest

from enumerations.catalogs import CATALOGS, get_catalog
from enumerations.catalogs.affinity_discount import AffinityDiscountType
from enumerations.catalogs.common_error_code import (
    INVALID_COMMON_ERROR_CODE,
    CommonErrorCode,
    CommonErrorCodeID,
)
from enumerations.catalogs.current_insurance_status import CurrentInsuranceStatus
from enumerations.catalogs.discount import Discount
from enumerations.catalogs.gender import Gender
from enumerations.catalogs.incident import Incident, IncidentCategory, IncidentClass
from enumerations.catalogs.log_level import LogLevel, is_more_urgent
from enumerations.catalogs.marital_status import MaritalStatus
from enumerations.catalogs.state import State, StateID, ValidatedStateID
from enumerations.catalogs.stop_quote_reason import StopQuoteReason
from enumerations.catalogs.vehicle_mileage import VehicleMileage
from enumerations.catalogs.vehicle_ownership import VehicleOwnership
from enumerations.catalogs.years_with import YearsWith


class TestRegistry:
    """Test the catalog registry."""

    @pytest.mark.parametrize(
        "catalog,count",
        [
            (AffinityDiscountType, 4),
            (CommonErrorCode, 17),
            (CurrentInsuranceStatus, 6),
            (Discount, 23),
            (Gender, 2),
            (Incident, 30),
            (LogLevel, 7),
            (MaritalStatus, 6),
            (State, 52),
            (StopQuoteReason, 27),
            (VehicleMileage, 8),
            (VehicleOwnership, 2),
            (YearsWith, 6),
        ],
    )
    def test_item_counts(self, catalog, count):
        assert len(catalog) == count

    def test_every_catalog_registered(self):
        assert len(CATALOGS) == 13

    def test_get_catalog(self):
        assert get_catalog("Gender") is Gender
        assert get_catalog("gender") is Gender
        assert get_catalog(" GENDER ") is Gender
        assert get_catalog("EnumGender") is Gender
        assert get_catalog("enumstopquotereason") is StopQuoteReason
        assert get_catalog("nope") is None


class TestGender:
    def test_items(self):
        assert Gender.male.id == "M"
        assert Gender.male.description == "Male"
        assert Gender.female.sort_order == 2
        assert Gender.description == "genders"
        assert Gender.name == "EnumGender"


class TestIncident:
    """Test incident metadata and aliases."""

    def test_meta_projection(self):
        item = Incident.accident_at_fault
        assert item.id == "AtFaultAccident"
        assert item.description == "Accident – At Fault"
        assert item.category == IncidentCategory.ACCIDENT_OR_CLAIM
        assert item.classification == IncidentClass.AT_FAULT
        assert item.meta == {"Category": "Accidents/Claims", "Classification": "AFA"}

    def test_ids_differ_from_names(self):
        assert Incident.roadside.id == "ers"
        assert Incident.police_report_filed.id == "MVRAccidentDescription"
        assert Incident.duidwi.classification == IncidentClass.DUI

    def test_aliases(self):
        assert Incident.by_id_string("atfault") is Incident.accident_at_fault
        assert Incident.by_id_string("NotAtFault") is Incident.accident_not_at_fault
        assert len(Incident.index) == 32

    def test_every_item_is_categorized(self):
        categories = {
            IncidentCategory.ACCIDENT_OR_CLAIM,
            IncidentCategory.MINOR_VIOLATION,
            IncidentCategory.MAJOR_VIOLATION,
            IncidentCategory.OTHER_VIOLATION,
        }
        assert all(item.category in categories for item in Incident)


class TestStateCodes:
    """Test jurisdiction metadata on discounts and marital statuses."""

    def test_discount_state_codes(self):
        assert Discount.referral.id == "referralCode"
        assert Discount.referral.state_codes == "VA, MD, TX, IL"
        assert Discount.referral.state_code_list() == ["VA", "MD", "TX", "IL"]
        assert Discount.anti_theft.state_code_list() == ["IL"]

    def test_applies_in(self):
        assert Discount.compare.applies_in("tx")
        assert not Discount.compare.applies_in("VA")
        assert not Discount.work_from_home.applies_in("GA")
        assert not Discount.reapplication.applies_in("MD")

    def test_affinity_discount(self):
        assert AffinityDiscountType.admiral_employee_discount.id == "Admiral_Employee"
        assert "TN" not in AffinityDiscountType.aceable.state_code_list()

    def test_marital_status(self):
        assert MaritalStatus.civil_union.state_code_list() == ["IL"]
        assert MaritalStatus.never_married.alternative_keys == "single,unmarried"


class TestCommonErrorCode:
    def test_to_string(self):
        assert CommonErrorCodeID("DBRead").to_string() == "DBRead: data read error from database"
        assert CommonErrorCodeID("dbread").to_string() == "DBRead: data read error from database"

    def test_to_string_invalid(self):
        assert CommonErrorCodeID("Nope").to_string() == INVALID_COMMON_ERROR_CODE
        assert CommonErrorCodeID("").to_string() == INVALID_COMMON_ERROR_CODE


class TestLogLevel:
    """Test log level urgency and the loguru mapping."""

    def test_urgency(self):
        assert LogLevel.error.is_more_urgent_than(LogLevel.info)
        assert not LogLevel.info.is_more_urgent_than(LogLevel.error)
        assert not LogLevel.info.is_more_urgent_than(LogLevel.info)

    def test_urgency_with_absent_levels(self):
        assert LogLevel.trace.is_more_urgent_than(None)
        assert is_more_urgent(LogLevel.trace, None)
        assert not is_more_urgent(None, LogLevel.panic)
        assert not is_more_urgent(None, None)

    @pytest.mark.parametrize(
        "item_id,expected",
        [
            ("PANIC", "CRITICAL"),
            ("FATAL", "CRITICAL"),
            ("ERROR", "ERROR"),
            ("WARN", "WARNING"),
            ("INFO", "INFO"),
            ("DEBUG", "DEBUG"),
            ("TRACE", "TRACE"),
        ],
    )
    def test_loguru_level(self, item_id, expected):
        assert LogLevel.by_id_string(item_id).loguru_level == expected


class TestVehicle:
    """Test vehicle ownership and mileage bands."""

    def test_ownership_ids(self):
        assert VehicleOwnership.paid_off.id == "PaidOff"
        assert VehicleOwnership.make_payments.id == "Other"
        assert VehicleOwnership.make_payments.sort_order == 4

    @pytest.mark.parametrize(
        "mileage,expected",
        [
            (0, "less_than_4000"),
            (3999, "less_than_4000"),
            (4000, "4000_to_5999"),
            (7999, "6000_to_7999"),
            (8000, "8000_to_9999"),
            (11999, "10000_to_11999"),
            (12000, "12000_to_14999"),
            (19999, "15000_to_19999"),
            (20000, "20000_or_more"),
            (250000, "20000_or_more"),
        ],
    )
    def test_from_mileage(self, mileage, expected):
        assert VehicleMileage.from_mileage(mileage) == expected

    def test_from_mileage_none(self):
        assert VehicleMileage.from_mileage(None) is None

    def test_bands_are_contiguous(self):
        bands = list(VehicleMileage)
        for lower, upper in zip(bands, bands[1:]):
            assert int(lower.max) + 1 == int(upper.min)


class TestState:
    """Test state metadata and insurability."""

    def test_meta(self):
        assert State.district_of_columbia.description == "DC"
        assert State.district_of_columbia.display_name == "District Of Columbia"
        assert State.non_us.id == "ZZ"
        assert State.non_us.full_name == "Non-US"

    @pytest.mark.parametrize("code", ["VA", "TX", "MD", "IL", "IN", "TN", "OH", "GA"])
    def test_insurable(self, code):
        assert State.is_insurable_state(StateID(code))
        assert State.is_insurable_state(code.lower())

    def test_not_insurable(self):
        assert not State.is_insurable_state(StateID("CA"))
        assert not State.is_insurable_state(StateID("XX"))
        assert not State.is_insurable_state(StateID(""))
        assert not State.is_insurable_state(None)

    def test_insurable_from_capturing_id(self):
        assert State.is_insurable_state(ValidatedStateID.from_json('"oh"'))
        assert not State.is_insurable_state(ValidatedStateID.from_json('"ON"'))


class TestYearsWith:
    def test_alternative_keys(self):
        assert [item.alternative_keys for item in YearsWith] == ["0", "1", "2", "3", "4", "5"]
