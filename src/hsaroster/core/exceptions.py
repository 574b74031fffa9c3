"""HSA roster exception hierarchy."""

from __future__ import annotations


class HSARosterError(Exception):
    """Base exception for all HSA roster errors."""


class ConfigurationError(HSARosterError):
    """Required startup configuration is missing or invalid."""


class RuleError(HSARosterError):
    """A business rule could not be applied to a single employee record."""


class UnknownPlanTypeError(RuleError):
    """Plan type is not one of the known HDHP coverage levels."""

    def __init__(self, plan_type: str) -> None:
        self.plan_type = plan_type
        super().__init__(f"unknown plan type: {plan_type!r}")


class InvalidDateOfBirthError(RuleError, ValueError):
    """Date of birth is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid date of birth {value!r}: expected YYYY-MM-DD")


class UpstreamError(HSARosterError):
    """The roster data API could not produce a usable employee list."""


class UpstreamFetchError(UpstreamError):
    """Request to the roster data API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class UpstreamSchemaError(UpstreamError):
    """Roster data API response did not match the expected shape."""
