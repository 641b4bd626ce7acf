"""Catalog registry.

Importing this package builds every catalog and binds each identifier type to
its catalog.
"""

from typing import Optional

from enumerations.catalogs.affinity_discount import AffinityDiscountType
from enumerations.catalogs.common_error_code import CommonErrorCode
from enumerations.catalogs.current_insurance_status import CurrentInsuranceStatus
from enumerations.catalogs.discount import Discount
from enumerations.catalogs.gender import Gender
from enumerations.catalogs.incident import Incident
from enumerations.catalogs.log_level import LogLevel
from enumerations.catalogs.marital_status import MaritalStatus
from enumerations.catalogs.state import State
from enumerations.catalogs.stop_quote_reason import StopQuoteReason
from enumerations.catalogs.vehicle_mileage import VehicleMileage
from enumerations.catalogs.vehicle_ownership import VehicleOwnership
from enumerations.catalogs.years_with import YearsWith
from enumerations.core.catalog import Enumeration

# keyed by the short catalog name used in API paths
CATALOGS: dict[str, Enumeration] = {
    "AffinityDiscountType": AffinityDiscountType,
    "CommonErrorCode": CommonErrorCode,
    "CurrentInsuranceStatus": CurrentInsuranceStatus,
    "Discount": Discount,
    "Gender": Gender,
    "Incident": Incident,
    "LogLevel": LogLevel,
    "MaritalStatus": MaritalStatus,
    "State": State,
    "StopQuoteReason": StopQuoteReason,
    "VehicleMileage": VehicleMileage,
    "VehicleOwnership": VehicleOwnership,
    "YearsWith": YearsWith,
}

_CATALOGS_LOWER = {name.lower(): catalog for name, catalog in CATALOGS.items()}


def get_catalog(name: str) -> Optional[Enumeration]:
    """Look up a catalog by short name (``gender``) or full name (``EnumGender``)."""
    key = name.strip().lower()
    if key.startswith("enum") and key not in _CATALOGS_LOWER:
        key = key[len("enum"):]

    return _CATALOGS_LOWER.get(key)


__all__ = [
    "CATALOGS",
    "get_catalog",
    "AffinityDiscountType",
    "CommonErrorCode",
    "CurrentInsuranceStatus",
    "Discount",
    "Gender",
    "Incident",
    "LogLevel",
    "MaritalStatus",
    "State",
    "StopQuoteReason",
    "VehicleMileage",
    "VehicleOwnership",
    "YearsWith",
]
