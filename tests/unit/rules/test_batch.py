"""Tests for batch processing of the roster."""

from __future__ import annotations

from datetime import date

from structlog.testing import capture_logs

from hsaroster.rules.batch import process_employees
from tests.fakes import make_employee

TODAY = date(2024, 6, 15)
AGE_54 = "1970-01-20"
AGE_55 = "1969-06-15"


def test_self_only_at_minimum_age_54():
    emp = make_employee(plan_type="Self-only", deductible=1600, date_of_birth=AGE_54)
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is True
    assert emp.hsa_max_contribution == 4150


def test_self_only_below_minimum():
    emp = make_employee(plan_type="Self-only", deductible=1599, date_of_birth=AGE_54)
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is False
    assert emp.hsa_max_contribution == 0


def test_family_at_minimum_age_55():
    emp = make_employee(plan_type="Family", deductible=3200, date_of_birth=AGE_55)
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is True
    assert emp.hsa_max_contribution == 9300


def test_ineligible_ignores_bad_date():
    emp = make_employee(deductible=100, date_of_birth="not-a-date")
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is False
    assert emp.hsa_max_contribution == 0


def test_malformed_date_degrades_only_that_record():
    bad = make_employee(name="Bad", date_of_birth="not-a-date")
    good = make_employee(name="Good", date_of_birth=AGE_54)
    process_employees([bad, good], TODAY)

    assert bad.hsa_eligible is True
    assert bad.hsa_max_contribution == 0
    assert good.hsa_max_contribution == 4150


def test_unknown_plan_type_is_ineligible():
    emp = make_employee(plan_type="PPO", deductible=50_000)
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is False
    assert emp.hsa_max_contribution == 0


def test_mutates_in_place_and_preserves_order():
    employees = [make_employee(name=n) for n in ("Zed", "Amy", "Mo")]
    result = process_employees(employees, TODAY)
    assert result is employees
    assert [e.name for e in result] == ["Zed", "Amy", "Mo"]


def test_stale_derived_fields_are_recomputed():
    emp = make_employee(deductible=10, hsa_eligible=True, hsa_max_contribution=99_999)
    process_employees([emp], TODAY)
    assert emp.hsa_eligible is False
    assert emp.hsa_max_contribution == 0


def test_empty_roster():
    assert process_employees([], TODAY) == []


class TestLogging:
    def test_one_processed_event_per_record_in_order(self):
        employees = [
            make_employee(name="Ok", date_of_birth=AGE_54),
            make_employee(name="Bad", date_of_birth="not-a-date"),
            make_employee(name="Gold", plan_type="Gold"),
        ]
        with capture_logs() as logs:
            process_employees(employees, TODAY)

        processed = [e for e in logs if e["event"] == "employee_processed"]
        assert [e["name"] for e in processed] == ["Ok", "Bad", "Gold"]
        assert all(e["log_level"] == "info" for e in processed)
        assert processed[0] == {
            "event": "employee_processed",
            "log_level": "info",
            "name": "Ok",
            "plan_type": "Self-only",
            "deductible": 1600,
            "date_of_birth": AGE_54,
            "hsa_eligible": True,
            "hsa_max_contribution": 4150,
        }

    def test_rule_errors_logged_as_warnings_naming_employee(self):
        employees = [
            make_employee(name="Ok", date_of_birth=AGE_54),
            make_employee(name="Bad", date_of_birth="not-a-date"),
            make_employee(name="Gold", plan_type="Gold"),
        ]
        with capture_logs() as logs:
            process_employees(employees, TODAY)

        errors = [e for e in logs if e["event"] == "employee_rule_error"]
        assert [(e["name"], e["log_level"]) for e in errors] == [
            ("Bad", "warning"),
            ("Gold", "warning"),
        ]
        assert "not-a-date" in errors[0]["error"]
        assert "Gold" in errors[1]["error"]
