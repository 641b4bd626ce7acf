"""Incident enumeration: types of driving incident reported on a quote.

Every item carries a ``Category`` and a ``Classification`` metadata value.
Two legacy spellings are accepted as aliases on decode and always encode back
to the canonical ids.
"""

from dataclasses import dataclass, field

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID

INCIDENT_META_CATEGORY_KEY = "Category"
INCIDENT_META_CLASSIFICATION_KEY = "Classification"


class IncidentCategory:
    """Values of the incident ``Category`` metadata."""

    ACCIDENT_OR_CLAIM = "Accidents/Claims"
    MINOR_VIOLATION = "Minor Violations"
    MAJOR_VIOLATION = "Major Violations"
    OTHER_VIOLATION = "Other Violations"


class IncidentClass:
    """Values of the incident ``Classification`` metadata."""

    AT_FAULT = "AFA"
    DUI = "DUI"
    MINOR = "MIN"
    MAJOR = "MAJ"
    NON_CHARGEABLE_ACCIDENT = "NCA"
    NON_CHARGEABLE_CONVICTION = "NCC"


class IncidentID(EnumID):
    """Identifier of an Incident item."""


class ValidatedIncidentID(ValidatedID, id_type=IncidentID):
    """Capturing Incident identifier."""


@dataclass(frozen=True, eq=False)
class IncidentItem(EnumItem):
    """A single Incident item with its category and classification."""

    category: str = field(init=False, default="")
    classification: str = field(init=False, default="")

    meta_fields = {
        "category": INCIDENT_META_CATEGORY_KEY,
        "classification": INCIDENT_META_CLASSIFICATION_KEY,
    }


class EnumIncident(Enumeration[IncidentItem]):
    """Collection of Incident items."""

    id_type = IncidentID

    accident_at_fault: IncidentItem
    accident_not_at_fault: IncidentItem
    administrative_note: IncidentItem
    driving_on_revoked_registration: IncidentItem
    duidwi: IncidentItem
    equipment_cargo_littering: IncidentItem
    expired_or_improper_license_plates: IncidentItem
    failure_to_obey_officer: IncidentItem
    failure_to_stop: IncidentItem
    glass: IncidentItem
    homicide_or_manslaughter: IncidentItem
    improper_driving: IncidentItem
    incident_otc_claim: IncidentItem
    license_suspension: IncidentItem
    minor_coverage_claim: IncidentItem
    minor_traffic_violation: IncidentItem
    no_payout_claim: IncidentItem
    other_major_violation: IncidentItem
    out_of_state_conviction: IncidentItem
    passing_school_bus: IncidentItem
    police_report_filed: IncidentItem
    racing: IncidentItem
    reckless_driving: IncidentItem
    rental: IncidentItem
    roadside: IncidentItem
    seat_belt_or_cell_phone_violation: IncidentItem
    small_comprehensive_claim: IncidentItem
    speeding_30_or_more: IncidentItem
    speed_less_than_30_over: IncidentItem
    theft_of_vehicle: IncidentItem


def _incident(
    id: str, description: str, name: str, sort_order: int, category: str, classification: str
) -> IncidentItem:
    return IncidentItem(
        IncidentID(id),
        description,
        name,
        sort_order,
        {
            INCIDENT_META_CATEGORY_KEY: category,
            INCIDENT_META_CLASSIFICATION_KEY: classification,
        },
    )


_ACCIDENT = IncidentCategory.ACCIDENT_OR_CLAIM
_MINOR = IncidentCategory.MINOR_VIOLATION
_MAJOR = IncidentCategory.MAJOR_VIOLATION
_OTHER = IncidentCategory.OTHER_VIOLATION

_ITEMS = [
    _incident("AtFaultAccident", "Accident – At Fault", "AccidentAtFault", 1, _ACCIDENT, IncidentClass.AT_FAULT),
    _incident("NonChargeableAccident", "Accident – Not At Fault", "AccidentNotAtFault", 2, _ACCIDENT, IncidentClass.NON_CHARGEABLE_ACCIDENT),
    _incident("AdministrativeNote", "Administrative Note", "AdministrativeNote", 3, _OTHER, "NON"),
    _incident("DrivingOnARevokedOrSuspendedLicense", "Driving on Revoked or Suspended License", "DrivingOnRevokedRegistration", 4, _MAJOR, IncidentClass.MAJOR),
    _incident("DrivingUnderTheInfluence", "DUI / DWI", "DUIDWI", 5, _MAJOR, IncidentClass.DUI),
    _incident("EquipmentCargoLittering", "Equipment, Cargo or Littering Violation", "EquipmentCargoLittering", 6, _OTHER, IncidentClass.NON_CHARGEABLE_CONVICTION),
    _incident("ExpiredOrImproperLicensePlates", "Expired or Improper License, Registration or Plates", "ExpiredOrImproperLicensePlates", 7, _OTHER, IncidentClass.NON_CHARGEABLE_CONVICTION),
    _incident("UseofRadarFailureToObeyOfficer", "Failure to Obey Officer / User of Radar", "FailureToObeyOfficer", 8, _MAJOR, IncidentClass.MAJOR),
    _incident("FailureToStopFollowingAccident", "Failure to Stop After Accident", "FailureToStop", 9, _MAJOR, IncidentClass.MAJOR),
    _incident("glass", "Glass Claim", "Glass", 10, _ACCIDENT, IncidentClass.NON_CHARGEABLE_ACCIDENT),
    _incident("HomicideOrManslaughter", "Homicide or Manslaughter", "HomicideOrManslaughter", 11, _MAJOR, IncidentClass.MAJOR),
    _incident("ImproperDriving", "Improper Driving / Other Minor Moving Violation", "ImproperDriving", 12, _MINOR, IncidentClass.MINOR),
    _incident("Comprehensive", "Comprehensive (OTC Claim)", "IncidentOTCClaim", 13, _ACCIDENT, "NON"),
    _incident("LicenseSuspension", "License Suspension", "LicenseSuspension", 14, _OTHER, "NON:"),
    _incident("MinorCoverageClaim", "Minor Coverage Claim", "MinorCoverageClaim", 15, _ACCIDENT, "NON"),
    _incident("FailureToYieldStopSignal", "Failure to Yield / Stop / Signal", "MinorTrafficViolation", 16, _MINOR, IncidentClass.MINOR),
    _incident("NoPayoutClaim", "No Payout Claim", "NoPayoutClaim", 17, _ACCIDENT, "NON"),
    _incident("OtherMajorViolations", "Other Major Violation", "OtherMajorViolation", 18, _MAJOR, IncidentClass.MAJOR),
    _incident("OutofStateConviction", "Out of State Conviction", "OutOfStateConviction", 19, _OTHER, "NON"),
    _incident("PassedStopppedSchoolBus", "Passing Stopped School Bus", "PassingSchoolBus", 20, _MAJOR, IncidentClass.MAJOR),
    _incident("MVRAccidentDescription", "Police Report Filed", "PoliceReportFiled", 21, _OTHER, "NON"),
    _incident("Racing", "Racing", "Racing", 22, _MAJOR, IncidentClass.MAJOR),
    _incident("RecklessOrNegligentDriving", "Reckless or Negligent Driving", "RecklessDriving", 23, _MAJOR, IncidentClass.MAJOR),
    _incident("rental", "Rental Incident", "Rental", 24, _ACCIDENT, IncidentClass.NON_CHARGEABLE_ACCIDENT),
    _incident("ers", "Roadside", "Roadside", 25, _ACCIDENT, IncidentClass.NON_CHARGEABLE_ACCIDENT),
    _incident("SeatBeltCellPhoneViolation", "Seat Belt or Cell Phone Violation", "SeatBeltOrCellPhoneViolation", 26, _OTHER, IncidentClass.NON_CHARGEABLE_CONVICTION),
    _incident("SmallComprehensiveClaim", "Small Comprehensive Claim", "SmallComprehensiveClaim", 27, _ACCIDENT, "NON"),
    _incident("Speed30MphOrMore", "Speeding – 30 MPH Or More Over Limit", "Speeding30OrMore", 28, _MAJOR, IncidentClass.MAJOR),
    _incident("SpeedLessThan30Over", "Speeding – Less than 30 MPH Over Limit", "SpeedLessThan30Over", 29, _MINOR, IncidentClass.MINOR),
    _incident("CriminalUseTheftofVehicle", "Theft of Vehicle / Criminal Use", "TheftOfVehicle", 30, _MAJOR, IncidentClass.MAJOR),
]

INCIDENT_ALIAS_AT_FAULT = "atfault"
INCIDENT_ALIAS_NOT_AT_FAULT = "notatfault"

_builder = CatalogBuilder(EnumIncident, name="EnumIncident", description="types of incident")
for _item in _ITEMS:
    _builder.add(_item)

# decode-only spellings; encoders still emit the canonical ids
_builder.alias(INCIDENT_ALIAS_AT_FAULT, _ITEMS[0])
_builder.alias(INCIDENT_ALIAS_NOT_AT_FAULT, _ITEMS[1])

Incident: EnumIncident = _builder.build()
