"""AffinityDiscountType enumeration."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, Enumeration, StateCodedItem
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class AffinityDiscountTypeID(EnumID):
    """Identifier of an AffinityDiscountType item."""


class ValidatedAffinityDiscountTypeID(ValidatedID, id_type=AffinityDiscountTypeID):
    """Capturing AffinityDiscountType identifier."""


@dataclass(frozen=True, eq=False)
class AffinityDiscountTypeItem(StateCodedItem):
    """A single AffinityDiscountType item and the states it is offered in."""


class EnumAffinityDiscountType(Enumeration[AffinityDiscountTypeItem]):
    """Collection of AffinityDiscountType items."""

    id_type = AffinityDiscountTypeID

    affinity_discount_none: AffinityDiscountTypeItem
    referral_discount: AffinityDiscountTypeItem
    aceable: AffinityDiscountTypeItem
    admiral_employee_discount: AffinityDiscountTypeItem


AffinityDiscountType: EnumAffinityDiscountType = (
    CatalogBuilder(
        EnumAffinityDiscountType,
        name="EnumAffinityDiscountType",
        description="types of affinity discounts",
    )
    .add(AffinityDiscountTypeItem(AffinityDiscountTypeID("None"), "None", "AffinityDiscountNone", 1, {"StateCodes": "IN,TN,IL,MD,TX,VA,GA,OH"}))
    .add(AffinityDiscountTypeItem(AffinityDiscountTypeID("ReferralCode"), "Referral Discount", "ReferralDiscount", 2, {"StateCodes": "IL,MD,TX,VA"}))
    .add(AffinityDiscountTypeItem(AffinityDiscountTypeID("Aceable"), "Aceable Discount", "Aceable", 3, {"StateCodes": "IN,IL,MD,TX,VA,GA,OH"}))
    .add(AffinityDiscountTypeItem(AffinityDiscountTypeID("Admiral_Employee"), "Admiral Employee Discount", "AdmiralEmployeeDiscount", 4, {"StateCodes": "IN,IL,MD,TX,VA,GA,OH"}))
    .build()
)
