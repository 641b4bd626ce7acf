"""StopQuoteReason enumeration: reasons for stopping an online quote."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class StopQuoteReasonID(EnumID):
    """Identifier of a StopQuoteReason item (a numeric rating-engine code)."""


class ValidatedStopQuoteReasonID(ValidatedID, id_type=StopQuoteReasonID):
    """Capturing StopQuoteReason identifier."""


@dataclass(frozen=True, eq=False)
class StopQuoteReasonItem(EnumItem):
    """A single StopQuoteReason item."""


class EnumStopQuoteReason(Enumeration[StopQuoteReasonItem]):
    """Collection of StopQuoteReason items."""

    id_type = StopQuoteReasonID

    bad_debts_flag: StopQuoteReasonItem
    unlicensed_additional_driver: StopQuoteReasonItem
    need_uw_photo_review: StopQuoteReasonItem
    block_license_from_state: StopQuoteReasonItem
    material_misrep: StopQuoteReasonItem
    incident_violations: StopQuoteReasonItem
    excluded_driver: StopQuoteReasonItem
    other_block: StopQuoteReasonItem
    has_sr_22: StopQuoteReasonItem
    has_fr_44: StopQuoteReasonItem
    branded_vehicle: StopQuoteReasonItem
    vehicle_ownership: StopQuoteReasonItem
    has_bad_vin: StopQuoteReasonItem
    restrict_license_status_suspended: StopQuoteReasonItem
    restrict_license_status: StopQuoteReasonItem
    has_active_policy: StopQuoteReasonItem
    not_rated_location: StopQuoteReasonItem
    territory_restriction: StopQuoteReasonItem
    exceed_limit_of_incident: StopQuoteReasonItem
    high_collision_deductible: StopQuoteReasonItem
    same_vin: StopQuoteReasonItem
    missing_primary_driver: StopQuoteReasonItem
    invalid_license_status: StopQuoteReasonItem
    license_not_allowed: StopQuoteReasonItem
    job_number_expired: StopQuoteReasonItem
    ratabase_error: StopQuoteReasonItem
    services_down: StopQuoteReasonItem


_REASONS = [
    ("1011", "Bad debts flag on account", "BadDebtsFlag"),
    ("1234", "Unlicensed additional driver", "UnlicensedAdditionalDriver"),
    ("1246", "Need UWPhoto review", "NeedUWPhotoReview"),
    ("1247", "Block license from state", "BlockLicenseFromState"),
    ("1348", "Material Misrep flag", "MaterialMisrep"),
    ("4018", "Incident violations", "IncidentViolations"),
    ("2222", "Exclude driver not allowed", "ExcludedDriver"),
    ("0", "Other block or unknown", "OtherBlock"),
    ("2255", "Has SR 22 flag", "HasSR22"),
    ("2244", "Has FR 44 flag", "HasFR44"),
    ("5024", "Has Branded vehicle", "BrandedVehicle"),
    ("6226", "Insurable interest", "VehicleOwnership"),
    ("9019", "Bad VIN", "HasBadVin"),
    ("9030", "Suspended license", "RestrictLicenseStatusSuspended"),
    ("9040", "Restricted license status", "RestrictLicenseStatus"),
    ("9031", "Has active policy", "HasActivePolicy"),
    ("9999", "Not rated location", "NotRatedLocation"),
    ("9018", "Binding restriction", "TerritoryRestriction"),
    ("8007", "Exceed the Limit of the Incident", "ExceedLimitOfIncident"),
    ("7005", "Veh has a Collision Deductible > $500.00", "HighCollisionDeductible"),
    ("5018", "Multiple Veh have Same VIN", "SameVIN"),
    ("5011", "All Veh Require Primary Driver", "MissingPrimaryDriver"),
    ("4008", "Invalid License Status", "InvalidLicenseStatus"),
    ("4002", "License not Allowed", "LicenseNotAllowed"),
    ("3102", "Job number expired", "JobNumberExpired"),
    ("10002", "Ratabase Error", "RatabaseError"),
    ("4000", "Services Down", "ServicesDown"),
]

_builder = CatalogBuilder(
    EnumStopQuoteReason,
    name="EnumStopQuoteReason",
    description="Reasons for stopping an online quote",
)
for _sort_order, (_id, _description, _name) in enumerate(_REASONS, start=1):
    _builder.add(StopQuoteReasonItem(StopQuoteReasonID(_id), _description, _name, _sort_order))

StopQuoteReason: EnumStopQuoteReason = _builder.build()
