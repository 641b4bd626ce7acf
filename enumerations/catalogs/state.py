"""State enumeration: states of the USA, keyed by postal code."""

from dataclasses import dataclass, field
from typing import Any

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID

# states we write policies in
INSURABLE_STATE_CODES = frozenset({"VA", "TX", "MD", "IL", "IN", "TN", "OH", "GA"})


class StateID(EnumID):
    """Identifier of a State item (two-letter postal code)."""


class ValidatedStateID(ValidatedID, id_type=StateID):
    """Capturing State identifier."""


@dataclass(frozen=True, eq=False)
class StateItem(EnumItem):
    """A single State item. The description is the postal code itself."""

    full_name: str = field(init=False, default="")
    display_name: str = field(init=False, default="")

    meta_fields = {"full_name": "FullName", "display_name": "DisplayName"}


class EnumState(Enumeration[StateItem]):
    """Collection of State items."""

    id_type = StateID

    alaska: StateItem
    alabama: StateItem
    arkansas: StateItem
    arizona: StateItem
    california: StateItem
    colorado: StateItem
    connecticut: StateItem
    district_of_columbia: StateItem
    delaware: StateItem
    florida: StateItem
    georgia: StateItem
    hawaii: StateItem
    iowa: StateItem
    idaho: StateItem
    illinois: StateItem
    indiana: StateItem
    kansas: StateItem
    kentucky: StateItem
    louisiana: StateItem
    massachusetts: StateItem
    maryland: StateItem
    maine: StateItem
    michigan: StateItem
    minnesota: StateItem
    missouri: StateItem
    mississippi: StateItem
    montana: StateItem
    north_carolina: StateItem
    north_dakota: StateItem
    nebraska: StateItem
    new_hampshire: StateItem
    new_jersey: StateItem
    new_mexico: StateItem
    nevada: StateItem
    new_york: StateItem
    ohio: StateItem
    oklahoma: StateItem
    oregon: StateItem
    pennsylvania: StateItem
    rhode_island: StateItem
    south_carolina: StateItem
    south_dakota: StateItem
    tennessee: StateItem
    texas: StateItem
    utah: StateItem
    virginia: StateItem
    vermont: StateItem
    washington: StateItem
    west_virginia: StateItem
    wisconsin: StateItem
    wyoming: StateItem
    non_us: StateItem

    def is_insurable_state(self, identifier: Any) -> bool:
        """Return True if ``identifier`` names a state we can write policies in."""
        item = self.by_id(identifier)
        if item is None:
            return False

        return str(item.id) in INSURABLE_STATE_CODES


# (id, name, full name, display name)
_STATES = [
    ("AK", "Alaska", "Alaska", "Alaska"),
    ("AL", "Alabama", "Alabama", "Alabama"),
    ("AR", "Arkansas", "Arkansas", "Arkansas"),
    ("AZ", "Arizona", "Arizona", "Arizona"),
    ("CA", "California", "California", "California"),
    ("CO", "Colorado", "Colorado", "Colorado"),
    ("CT", "Connecticut", "Connecticut", "Connecticut"),
    ("DC", "DistrictOfColumbia", "DistrictOfColumbia", "District Of Columbia"),
    ("DE", "Delaware", "Delaware", "Delaware"),
    ("FL", "Florida", "Florida", "Florida"),
    ("GA", "Georgia", "Georgia", "Georgia"),
    ("HI", "Hawaii", "Hawaii", "Hawaii"),
    ("IA", "Iowa", "Iowa", "Iowa"),
    ("ID", "Idaho", "Idaho", "Idaho"),
    ("IL", "Illinois", "Illinois", "Illinois"),
    ("IN", "Indiana", "Indiana", "Indiana"),
    ("KS", "Kansas", "Kansas", "Kansas"),
    ("KY", "Kentucky", "Kentucky", "Kentucky"),
    ("LA", "Louisiana", "Louisiana", "Louisiana"),
    ("MA", "Massachusetts", "Massachusetts", "Massachusetts"),
    ("MD", "Maryland", "Maryland", "Maryland"),
    ("ME", "Maine", "Maine", "Maine"),
    ("MI", "Michigan", "Michigan", "Michigan"),
    ("MN", "Minnesota", "Minnesota", "Minnesota"),
    ("MO", "Missouri", "Missouri", "Missouri"),
    ("MS", "Mississippi", "Mississippi", "Mississippi"),
    ("MT", "Montana", "Montana", "Montana"),
    ("NC", "NorthCarolina", "NorthCarolina", "North Carolina"),
    ("ND", "NorthDakota", "NorthDakota", "North Dakota"),
    ("NE", "Nebraska", "Nebraska", "Nebraska"),
    ("NH", "NewHampshire", "NewHampshire", "New Hampshire"),
    ("NJ", "NewJersey", "NewJersey", "New Jersey"),
    ("NM", "NewMexico", "NewMexico", "New Mexico"),
    ("NV", "Nevada", "Nevada", "Nevada"),
    ("NY", "NewYork", "NewYork", "NewYork"),
    ("OH", "Ohio", "Ohio", "Ohio"),
    ("OK", "Oklahoma", "Oklahoma", "Oklahoma"),
    ("OR", "Oregon", "Oregon", "Oregon"),
    ("PA", "Pennsylvania", "Pennsylvania", "Pennsylvania"),
    ("RI", "RhodeIsland", "RhodeIsland", "Rhode Island"),
    ("SC", "SouthCarolina", "SouthCarolina", "South Carolina"),
    ("SD", "SouthDakota", "SouthDakota", "South Dakota"),
    ("TN", "Tennessee", "Tennessee", "Tennessee"),
    ("TX", "Texas", "Texas", "Texas"),
    ("UT", "Utah", "Utah", "Utah"),
    ("VA", "Virginia", "Virginia", "Virginia"),
    ("VT", "Vermont", "Vermont", "Vermont"),
    ("WA", "Washington", "Washington", "Washington"),
    ("WV", "WestVirginia", "WestVirginia", "West Virginia"),
    ("WI", "Wisconsin", "Wisconsin", "Wisconsin"),
    ("WY", "Wyoming", "Wyoming", "Wyoming"),
    ("ZZ", "NonUS", "Non-US", "Non-US State"),
]

_builder = CatalogBuilder(EnumState, name="EnumState", description="States of the USA")
for _sort_order, (_id, _name, _full_name, _display_name) in enumerate(_STATES, start=1):
    _builder.add(
        StateItem(
            StateID(_id),
            _id,
            _name,
            _sort_order,
            {"FullName": _full_name, "DisplayName": _display_name},
        )
    )

State: EnumState = _builder.build()
