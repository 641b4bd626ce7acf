"""VehicleMileage enumeration: ranges of annual vehicle mileage."""

from dataclasses import dataclass, field
from typing import Optional

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class VehicleMileageID(EnumID):
    """Identifier of a VehicleMileage item."""


class ValidatedVehicleMileageID(ValidatedID, id_type=VehicleMileageID):
    """Capturing VehicleMileage identifier."""


@dataclass(frozen=True, eq=False)
class VehicleMileageItem(EnumItem):
    """A single VehicleMileage band with inclusive ``min`` and ``max`` bounds."""

    max: str = field(init=False, default="")
    min: str = field(init=False, default="")

    meta_fields = {"max": "Max", "min": "Min"}


class EnumVehicleMileage(Enumeration[VehicleMileageItem]):
    """Collection of VehicleMileage items."""

    id_type = VehicleMileageID

    less_than_4000: VehicleMileageItem
    from_4000_to_5999: VehicleMileageItem
    from_6000_to_7999: VehicleMileageItem
    from_8000_to_9999: VehicleMileageItem
    from_10000_to_11999: VehicleMileageItem
    from_12000_to_14999: VehicleMileageItem
    from_15000_to_19999: VehicleMileageItem
    more_than_20000: VehicleMileageItem

    def from_mileage(self, mileage: Optional[int]) -> Optional[VehicleMileageID]:
        """Return the id of the band an arbitrary mileage falls into."""
        if mileage is None:
            return None

        if mileage < 4000:
            return self.less_than_4000.id.clone()
        if mileage < 6000:
            return self.from_4000_to_5999.id.clone()
        if mileage < 8000:
            return self.from_6000_to_7999.id.clone()
        if mileage < 10000:
            return self.from_8000_to_9999.id.clone()
        if mileage < 12000:
            return self.from_10000_to_11999.id.clone()
        if mileage < 15000:
            return self.from_12000_to_14999.id.clone()
        if mileage < 20000:
            return self.from_15000_to_19999.id.clone()

        return self.more_than_20000.id.clone()


def _band(id: str, description: str, name: str, sort_order: int, minimum: str, maximum: str) -> VehicleMileageItem:
    return VehicleMileageItem(VehicleMileageID(id), description, name, sort_order, {"Max": maximum, "Min": minimum})


VehicleMileage: EnumVehicleMileage = (
    CatalogBuilder(EnumVehicleMileage, name="EnumVehicleMileage", description="ranges of vehicle mileage")
    .add(_band("less_than_4000", "Less than 4,000", "LessThan4000", 1, "0", "3999"))
    .add(_band("4000_to_5999", "4,000-5,999", "From4000To5999", 2, "4000", "5999"))
    .add(_band("6000_to_7999", "6,000-7,999", "From6000To7999", 3, "6000", "7999"))
    .add(_band("8000_to_9999", "8,000-9,999", "From8000To9999", 4, "8000", "9999"))
    .add(_band("10000_to_11999", "10,000-11,999", "From10000To11999", 5, "10000", "11999"))
    .add(_band("12000_to_14999", "12,000-14,999", "From12000To14999", 6, "12000", "14999"))
    .add(_band("15000_to_19999", "15,000-19,999", "From15000To19999", 7, "15000", "19999"))
    .add(_band("20000_or_more", "20,000 or more", "MoreThan20000", 8, "20000", "1000000"))
    .build()
)
