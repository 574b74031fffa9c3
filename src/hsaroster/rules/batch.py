"""Apply HSA rules across a roster, degrading bad rows instead of failing."""

from __future__ import annotations

from datetime import date

import structlog

from hsaroster.core.exceptions import RuleError, UnknownPlanTypeError
from hsaroster.models.employee import Employee
from hsaroster.rules.hsa import calculate_max_contribution, is_hsa_eligible

logger = structlog.get_logger(__name__)


def process_employees(employees: list[Employee], today: date | None = None) -> list[Employee]:
    """Recompute ``hsa_eligible`` and ``hsa_max_contribution`` in place.

    Order is preserved and the same list is returned. A rule failure on one
    employee zeroes that employee's ceiling and is logged; the rest of the
    batch is unaffected.
    """
    for emp in employees:
        _apply_rules(emp, today)
        logger.info(
            "employee_processed",
            name=emp.name,
            plan_type=emp.plan_type,
            deductible=emp.deductible,
            date_of_birth=emp.date_of_birth,
            hsa_eligible=emp.hsa_eligible,
            hsa_max_contribution=emp.hsa_max_contribution,
        )
    return employees


def _apply_rules(emp: Employee, today: date | None) -> None:
    try:
        emp.hsa_eligible = is_hsa_eligible(emp.plan_type, emp.deductible)
    except UnknownPlanTypeError as exc:
        logger.warning("employee_rule_error", name=emp.name, error=str(exc))
        emp.hsa_eligible = False
        emp.hsa_max_contribution = 0
        return

    if not emp.hsa_eligible:
        emp.hsa_max_contribution = 0
        return

    try:
        emp.hsa_max_contribution = calculate_max_contribution(
            emp.plan_type, emp.date_of_birth, today,
        )
    except RuleError as exc:
        logger.warning("employee_rule_error", name=emp.name, error=str(exc))
        emp.hsa_max_contribution = 0
