"""HSA eligibility and contribution ceiling rules."""

from __future__ import annotations

from datetime import date

from hsaroster.rules.age import calculate_age
from hsaroster.rules.limits import (
    CATCH_UP_AGE,
    CATCH_UP_CONTRIBUTION,
    HDHP_MINIMUM_DEDUCTIBLE,
    HSA_CONTRIBUTION_LIMIT,
    resolve_plan_type,
)


def is_hsa_eligible(plan_type: str, deductible: int) -> bool:
    """True when the deductible meets the HDHP minimum for the plan type.

    Raises:
        UnknownPlanTypeError: plan type is not Self-only or Family.
    """
    plan = resolve_plan_type(plan_type)
    return deductible >= HDHP_MINIMUM_DEDUCTIBLE[plan]


def calculate_max_contribution(plan_type: str, date_of_birth: str,
                               today: date | None = None) -> int:
    """Annual HSA contribution ceiling, including the age 55+ catch-up.

    Raises:
        UnknownPlanTypeError: plan type is not Self-only or Family.
        InvalidDateOfBirthError: date of birth is not YYYY-MM-DD.
    """
    plan = resolve_plan_type(plan_type)
    limit = HSA_CONTRIBUTION_LIMIT[plan]

    if calculate_age(date_of_birth, today) >= CATCH_UP_AGE:
        limit += CATCH_UP_CONTRIBUTION
    return limit
