"""Employee roster models.

Upstream rows arrive as ``{"records": [{"fields": {...}}, ...]}`` with
human-readable column names; aliases map them onto snake_case fields.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PlanType(StrEnum):
    SELF_ONLY = "Self-only"
    FAMILY = "Family"


class Employee(BaseModel):
    """Single employee with HDHP enrollment details and derived HSA limits."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    # --- Source columns (empty cells are omitted upstream) ---
    name: str = Field(default="", alias="Name")
    plan_type: str = Field(default="", alias="Plan Type")
    deductible: int = Field(default=0, alias="Deductible")
    date_of_birth: str = Field(default="", alias="Date of birth")

    # --- Derived; recomputed on every processing pass ---
    hsa_eligible: bool = False
    hsa_max_contribution: int = 0


class RosterRecord(BaseModel):
    """One table row as returned by the roster API."""

    fields: Employee = Field(default_factory=Employee)


class RosterResponse(BaseModel):
    """Top-level roster API response body."""

    records: list[RosterRecord]
