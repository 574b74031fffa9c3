"""IRS HSA/HDHP limits for the 2024 tax year.

Source: IRS Rev. Proc. 2023-23.
"""

from __future__ import annotations

from types import MappingProxyType

from hsaroster.core.exceptions import UnknownPlanTypeError
from hsaroster.models.employee import PlanType

CATCH_UP_AGE = 55
CATCH_UP_CONTRIBUTION = 1000

HDHP_MINIMUM_DEDUCTIBLE: MappingProxyType[PlanType, int] = MappingProxyType({
    PlanType.SELF_ONLY: 1600,
    PlanType.FAMILY: 3200,
})

HSA_CONTRIBUTION_LIMIT: MappingProxyType[PlanType, int] = MappingProxyType({
    PlanType.SELF_ONLY: 4150,
    PlanType.FAMILY: 8300,
})


def resolve_plan_type(plan_type: str) -> PlanType:
    """Map a raw plan type string onto the closed enumeration."""
    try:
        return PlanType(plan_type)
    except ValueError:
        raise UnknownPlanTypeError(plan_type) from None
