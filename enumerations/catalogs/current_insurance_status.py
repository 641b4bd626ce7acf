"""CurrentInsuranceStatus enumeration and its display sub-collections."""

from dataclasses import dataclass

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID


class CurrentInsuranceStatusID(EnumID):
    """Identifier of a CurrentInsuranceStatus item."""


class ValidatedCurrentInsuranceStatusID(ValidatedID, id_type=CurrentInsuranceStatusID):
    """Capturing CurrentInsuranceStatus identifier."""


@dataclass(frozen=True, eq=False)
class CurrentInsuranceStatusItem(EnumItem):
    """A single CurrentInsuranceStatus item."""


class EnumCurrentInsuranceStatus(Enumeration[CurrentInsuranceStatusItem]):
    """Collection of CurrentInsuranceStatus items."""

    id_type = CurrentInsuranceStatusID

    own_policy: CurrentInsuranceStatusItem
    anothers_policy: CurrentInsuranceStatusItem
    deployed_overseas: CurrentInsuranceStatusItem
    expired_within_30_days: CurrentInsuranceStatusItem
    expired_over_30_days: CurrentInsuranceStatusItem
    no_insurance_required: CurrentInsuranceStatusItem


CurrentInsuranceStatus: EnumCurrentInsuranceStatus = (
    CatalogBuilder(
        EnumCurrentInsuranceStatus,
        name="EnumCurrentInsuranceStatus",
        description="current insurance statuses",
    )
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("own_policy"), "Yes, I have my own Policy", "OwnPolicy", 1))
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("on_anothers_policy"), "Yes, on anothers policy", "AnothersPolicy", 2))
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("military_overseas"), "Deployed Overseas with Military", "DeployedOverseas", 3))
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("policy_expired_within_30days"), "My Policy Expired 30 Days Ago or Less", "ExpiredWithin30Days", 4))
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("policy_expired_over_30days"), "My Policy Expired More Than 30 Days Ago", "ExpiredOver30Days", 5))
    .add(CurrentInsuranceStatusItem(CurrentInsuranceStatusID("just_acquired_auto"), "No Insurance Required", "NoInsuranceRequired", 6))
    .build()
)

# Sub-collections for display; they share item instances with the full catalog
# and do not replace it as the identifier's lookup catalog.
CurrentInsuranceStatusBasic: EnumCurrentInsuranceStatus = CurrentInsuranceStatus.subset(
    "EnumCurrentInsuranceStatusBasic",
    [CurrentInsuranceStatus.own_policy, CurrentInsuranceStatus.anothers_policy],
)

CurrentInsuranceReason: EnumCurrentInsuranceStatus = CurrentInsuranceStatus.subset(
    "EnumCurrentInsuranceReason",
    [
        CurrentInsuranceStatus.deployed_overseas,
        CurrentInsuranceStatus.expired_within_30_days,
        CurrentInsuranceStatus.expired_over_30_days,
        CurrentInsuranceStatus.no_insurance_required,
    ],
)
