"""MaritalStatus enumeration.

Partner systems send marital statuses as free-text words ("single",
"unmarried", ...) as often as they send our single-letter ids, so items carry
an ``AlternativeKeys`` list resolved through ``by_alternative_key``.
"""

from dataclasses import dataclass, field
from typing import Optional

from enumerations.core.catalog import (
    AlternativeKeyIndex,
    CatalogBuilder,
    Enumeration,
    StateCodedItem,
)
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class MaritalStatusID(EnumID):
    """Identifier of a MaritalStatus item."""


class ValidatedMaritalStatusID(ValidatedID, id_type=MaritalStatusID):
    """Capturing MaritalStatus identifier."""


@dataclass(frozen=True, eq=False)
class MaritalStatusItem(StateCodedItem):
    """A single MaritalStatus item."""

    alternative_keys: str = field(init=False, default="")

    meta_fields = {"state_codes": "StateCodes", "alternative_keys": "AlternativeKeys"}


class EnumMaritalStatus(Enumeration[MaritalStatusItem]):
    """Collection of MaritalStatus items."""

    id_type = MaritalStatusID

    never_married: MaritalStatusItem
    married: MaritalStatusItem
    divorced: MaritalStatusItem
    separated: MaritalStatusItem
    widowed: MaritalStatusItem
    civil_union: MaritalStatusItem

    def by_alternative_key(self, key: Optional[str]) -> Optional[MaritalStatusID]:
        """Resolve an id or alternative key (trimmed, case-insensitive) to an id."""
        return _alternative_keys.lookup(key)


def _status(id: str, description: str, name: str, sort_order: int, state_codes: str, keys: str) -> MaritalStatusItem:
    return MaritalStatusItem(
        MaritalStatusID(id),
        description,
        name,
        sort_order,
        {"StateCodes": state_codes, "AlternativeKeys": keys},
    )


_ALL_STATES = "IN,TN,IL,MD,TX,VA,GA,OH"

MaritalStatus: EnumMaritalStatus = (
    CatalogBuilder(EnumMaritalStatus, name="EnumMaritalStatus", description="marital statuses")
    .add(_status("S", "Single (Never Married)", "NeverMarried", 1, _ALL_STATES, "single,unmarried"))
    .add(_status("M", "Married", "Married", 2, _ALL_STATES, "married"))
    .add(_status("D", "Divorced", "Divorced", 3, _ALL_STATES, "divorced"))
    .add(_status("P", "Separated", "Separated", 4, _ALL_STATES, "separated"))
    .add(_status("W", "Widowed", "Widowed", 5, _ALL_STATES, "widowed"))
    .add(_status("MCU", "Civil Union", "CivilUnion", 6, "IL", "civil,union"))
    .build()
)

_alternative_keys: AlternativeKeyIndex[MaritalStatusItem] = AlternativeKeyIndex(MaritalStatus)
