"""Discount enumeration: discounts available to our customers."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, Enumeration, StateCodedItem
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID

_ALL_STATES = "IN,TN,IL,MD,TX,VA,GA,OH"


class DiscountID(EnumID):
    """Identifier of a Discount item."""


class ValidatedDiscountID(ValidatedID, id_type=DiscountID):
    """Capturing Discount identifier."""


@dataclass(frozen=True, eq=False)
class DiscountItem(StateCodedItem):
    """A single Discount item and the states it is offered in."""


class EnumDiscount(Enumeration[DiscountItem]):
    """Collection of Discount items."""

    id_type = DiscountID

    early_bird: DiscountItem
    electronic_signature: DiscountItem
    good_student: DiscountItem
    home_owner: DiscountItem
    multi_car: DiscountItem
    online: DiscountItem
    paperless: DiscountItem
    referral: DiscountItem
    responsible_driver: DiscountItem
    safety_feature: DiscountItem
    student_away: DiscountItem
    work_from_home: DiscountItem
    anti_theft: DiscountItem
    compare: DiscountItem
    mature_driver: DiscountItem
    multi_policy: DiscountItem
    home_renters: DiscountItem
    life_moto: DiscountItem
    pif: DiscountItem
    reapplication: DiscountItem
    safe_car: DiscountItem
    admiral_employee: DiscountItem
    aceable: DiscountItem


def _discount(id: str, description: str, name: str, sort_order: int, state_codes: str) -> DiscountItem:
    return DiscountItem(DiscountID(id), description, name, sort_order, {"StateCodes": state_codes})


Discount: EnumDiscount = (
    CatalogBuilder(EnumDiscount, name="EnumDiscount", description="discounts available to our customers")
    .add(_discount("earlybird", "Early Bird Discount", "EarlyBird", 1, _ALL_STATES))
    .add(_discount("electronicsignature", "Electronic Signature Discount", "ElectronicSignature", 2, _ALL_STATES))
    .add(_discount("goodstudent", "Good Student Discount", "GoodStudent", 3, _ALL_STATES))
    .add(_discount("homeowner", "Homeowner Discount", "HomeOwner", 4, _ALL_STATES))
    .add(_discount("multicar", "Multi-Car Discount", "MultiCar", 5, _ALL_STATES))
    .add(_discount("online", "Online Discount", "Online", 6, _ALL_STATES))
    .add(_discount("paperless", "Paperless Discount", "Paperless", 7, _ALL_STATES))
    .add(_discount("referralCode", "Referral Discount", "Referral", 8, "VA, MD, TX, IL"))
    .add(_discount("responsibledriver", "Responsible Driver Discount", "ResponsibleDriver", 9, _ALL_STATES))
    .add(_discount("safetyfeature", "Safety Feature Discount", "SafetyFeature", 10, _ALL_STATES))
    .add(_discount("studentaway", "Student Away Discount", "StudentAway", 11, _ALL_STATES))
    .add(_discount("workFromHome", "Work From Home Discount", "WorkFromHome", 12, "IN,TN,IL,MD,TX,VA,OH"))
    .add(_discount("antitheft", "Anti-Theft Discount", "AntiTheft", 13, "IL"))
    .add(_discount("compare", "Compare.com Discount", "Compare", 14, "IL,TX"))
    .add(_discount("maturedriver", "Mature Driver Discount", "MatureDriver", 15, "VA,IL,TN,OH"))
    .add(_discount("multipolicy", "Multi-Policy Discount", "MultiPolicy", 16, _ALL_STATES))
    .add(_discount("homerenters", "Home/Renters Discount", "HomeRenters", 17, _ALL_STATES))
    .add(_discount("lifemoto", "Life/Moto Discount", "LifeMoto", 18, _ALL_STATES))
    .add(_discount("pif", "PIF Discount", "PIF", 19, _ALL_STATES))
    .add(_discount("reapplication", "Reapplication Discount", "Reapplication", 20, "IN,TN,IL,TX,VA,GA,OH"))
    .add(_discount("safecar", "Safe Car Discount", "SafeCar", 21, _ALL_STATES))
    .add(_discount("admiralemployee", "Admiral Employee Discount", "AdmiralEmployee", 22, "VA,TX,MD,IL,IN,GA,OH"))
    .add(_discount("aceable", "Aceable Discount", "Aceable", 23, "VA,TX,MD,IL,IN,GA,OH"))
    .build()
)
