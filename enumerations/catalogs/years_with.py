"""YearsWith enumeration: ranges of years with current carrier."""

from dataclasses import dataclass, field
from typing import Optional

from enumerations.core.catalog import AlternativeKeyIndex, CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class YearsWithID(EnumID):
    """Identifier of a YearsWith item."""


class ValidatedYearsWithID(ValidatedID, id_type=YearsWithID):
    """Capturing YearsWith identifier."""


@dataclass(frozen=True, eq=False)
class YearsWithItem(EnumItem):
    """A single YearsWith item; ``alternative_keys`` holds the plain year count."""

    alternative_keys: str = field(init=False, default="")

    meta_fields = {"alternative_keys": "AlternativeKeys"}


class EnumYearsWith(Enumeration[YearsWithItem]):
    """Collection of YearsWith items."""

    id_type = YearsWithID

    less_than_1: YearsWithItem
    one: YearsWithItem
    two: YearsWithItem
    three: YearsWithItem
    four: YearsWithItem
    five_plus: YearsWithItem

    def by_alternative_key(self, key: Optional[str]) -> Optional[YearsWithID]:
        """Resolve an id or a year count such as ``"3"`` to an id."""
        return _alternative_keys.lookup(key)


YearsWith: EnumYearsWith = (
    CatalogBuilder(EnumYearsWith, name="EnumYearsWith", description="ranges of years with current carrier")
    .add(YearsWithItem(YearsWithID("less_1year"), "Less Than 1 Year", "LessThan1", 1, {"AlternativeKeys": "0"}))
    .add(YearsWithItem(YearsWithID("1year"), "1 Year", "One", 2, {"AlternativeKeys": "1"}))
    .add(YearsWithItem(YearsWithID("2years"), "2 Years", "Two", 3, {"AlternativeKeys": "2"}))
    .add(YearsWithItem(YearsWithID("3years"), "3 Years", "Three", 4, {"AlternativeKeys": "3"}))
    .add(YearsWithItem(YearsWithID("4years"), "4 Years", "Four", 5, {"AlternativeKeys": "4"}))
    .add(YearsWithItem(YearsWithID("5plus_years"), "5 or More Years", "FivePlus", 6, {"AlternativeKeys": "5"}))
    .build()
)

_alternative_keys: AlternativeKeyIndex[YearsWithItem] = AlternativeKeyIndex(YearsWith)
