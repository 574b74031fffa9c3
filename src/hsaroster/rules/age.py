"""Whole-year age from a YYYY-MM-DD date of birth."""

from __future__ import annotations

import re
from datetime import date

from hsaroster.core.exceptions import InvalidDateOfBirthError

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_date_of_birth(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string."""
    if not _ISO_DATE.fullmatch(value):
        raise InvalidDateOfBirthError(value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidDateOfBirthError(value) from None


def calculate_age(date_of_birth: str, today: date | None = None) -> int:
    """Age in completed years as of ``today`` (defaults to the current date).

    The birthday counts as reached once the calendar month/day is reached;
    a Feb 29 birthday is reached on Mar 1 in non-leap years.
    """
    dob = parse_date_of_birth(date_of_birth)
    if today is None:
        today = date.today()

    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age
