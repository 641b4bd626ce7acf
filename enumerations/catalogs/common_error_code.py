"""CommonErrorCode enumeration: error codes for common conditions."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID

INVALID_COMMON_ERROR_CODE = "invalid common error code"


class CommonErrorCodeID(EnumID):
    """Identifier of a CommonErrorCode item."""

    def to_string(self) -> str:
        """Render a uniform log message such as ``"DBRead: data read error from database"``."""
        item = self.item()
        if item is None:
            return INVALID_COMMON_ERROR_CODE

        return f"{item.id}: {item.description}"


class ValidatedCommonErrorCodeID(ValidatedID, id_type=CommonErrorCodeID):
    """Capturing CommonErrorCode identifier."""


@dataclass(frozen=True, eq=False)
class CommonErrorCodeItem(EnumItem):
    """A single CommonErrorCode item."""


class EnumCommonErrorCode(Enumeration[CommonErrorCodeItem]):
    """Collection of CommonErrorCode items."""

    id_type = CommonErrorCodeID

    db_read: CommonErrorCodeItem
    db_unknown: CommonErrorCodeItem
    db_write: CommonErrorCodeItem
    http_request: CommonErrorCodeItem
    http_status: CommonErrorCodeItem
    invalid_value: CommonErrorCodeItem
    marshal_json: CommonErrorCodeItem
    marshal_xml: CommonErrorCodeItem
    no_installment_preferred_pay_plan: CommonErrorCodeItem
    no_pif_pay_plan_error: CommonErrorCodeItem
    object_cant_be_blank: CommonErrorCodeItem
    pay_plans_empty: CommonErrorCodeItem
    rule_engine_error: CommonErrorCodeItem
    unauthorized: CommonErrorCodeItem
    unmarshal_json: CommonErrorCodeItem
    unmarshal_xml: CommonErrorCodeItem
    value_required: CommonErrorCodeItem


_CODES = [
    ("DBRead", "data read error from database"),
    ("DBUnknown", "unknown database error"),
    ("DBWrite", "data write error from database"),
    ("HTTPRequest", "call to service failed during request"),
    ("HTTPStatus", "call to service returned non-success HTTP code"),
    ("InvalidValue", "invalid field value"),
    ("MarshalJSON", "object provided isn't in proper JSON or has some invalid values"),
    ("MarshalXML", "object provided isn't in proper XML or has some invalid values"),
    ("NoInstallmentPreferredPayPlan", "there are no installment preferred pay plans on the policy"),
    ("NoPIFPayPlanError", "missing paid in full play plan"),
    ("ObjectCantBeBlank", "object is blank or null"),
    ("PayPlansEmpty", "there are no payment plans on the policy"),
    ("RuleEngineError", "received error from rule engine"),
    ("Unauthorized", "unauthorized request or access"),
    ("UnmarshalJSON", "data provided isn't in proper JSON or has some invalid values"),
    ("UnmarshalXML", "data provided isn't in proper XML or has some invalid values"),
    ("ValueRequired", "required field"),
]

_builder = CatalogBuilder(
    EnumCommonErrorCode,
    name="EnumCommonErrorCode",
    description="error codes for common conditions",
)
for _sort_order, (_id, _description) in enumerate(_CODES, start=1):
    # every id doubles as the item name
    _builder.add(CommonErrorCodeItem(CommonErrorCodeID(_id), _description, _id, _sort_order))

CommonErrorCode: EnumCommonErrorCode = _builder.build()
