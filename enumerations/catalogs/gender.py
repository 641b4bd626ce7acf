"""Gender enumeration."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class GenderID(EnumID):
    """Identifier of a Gender item."""


class ValidatedGenderID(ValidatedID, id_type=GenderID):
    """Capturing Gender identifier."""


@dataclass(frozen=True, eq=False)
class GenderItem(EnumItem):
    """A single Gender item."""


class EnumGender(Enumeration[GenderItem]):
    """Collection of Gender items."""

    id_type = GenderID

    male: GenderItem
    female: GenderItem


Gender: EnumGender = (
    CatalogBuilder(EnumGender, name="EnumGender", description="genders")
    .add(GenderItem(GenderID("M"), "Male", "Male", 1))
    .add(GenderItem(GenderID("F"), "Female", "Female", 2))
    .build()
)
