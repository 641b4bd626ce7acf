"""VehicleOwnership enumeration: ownership statuses for vehicles."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class VehicleOwnershipID(EnumID):
    """Identifier of a VehicleOwnership item."""


class ValidatedVehicleOwnershipID(ValidatedID, id_type=VehicleOwnershipID):
    """Capturing VehicleOwnership identifier."""


@dataclass(frozen=True, eq=False)
class VehicleOwnershipItem(EnumItem):
    """A single VehicleOwnership item."""


class EnumVehicleOwnership(Enumeration[VehicleOwnershipItem]):
    """Collection of VehicleOwnership items."""

    id_type = VehicleOwnershipID

    paid_off: VehicleOwnershipItem
    make_payments: VehicleOwnershipItem


# ids are the wire values expected by the rating engine and differ from the names
VehicleOwnership: EnumVehicleOwnership = (
    CatalogBuilder(
        EnumVehicleOwnership,
        name="EnumVehicleOwnership",
        description="ownership statuses for vehicles",
    )
    .add(VehicleOwnershipItem(VehicleOwnershipID("PaidOff"), "Own and do not make payments", "PaidOff", 3))
    .add(VehicleOwnershipItem(VehicleOwnershipID("Other"), "Make payments", "MakePayments", 4))
    .build()
)
