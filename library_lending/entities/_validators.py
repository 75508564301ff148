"""Field checks shared by the request schemas."""

import re
from datetime import date

PHONE_PATTERN = re.compile(r"^01[0125]\d{8}$")


def require_text(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field} is mandatory")
    return value


def require_past(value: date | None, field: str) -> date | None:
    if value is not None and value >= date.today():
        raise ValueError(f"{field} must be in the past")
    return value


def require_past_or_present(value: date | None, field: str) -> date | None:
    if value is not None and value > date.today():
        raise ValueError(f"{field} must not be in the future")
    return value


def require_present_or_future(value: date | None, field: str) -> date | None:
    if value is not None and value < date.today():
        raise ValueError(f"{field} must not be in the past")
    return value


def require_phone(value: str | None) -> str | None:
    if value is not None and not PHONE_PATTERN.match(value):
        raise ValueError(
            "Invalid format. Phone number must start with '01', followed by a digit "
            "from the set {0, 1, 2, 5}, and then eight more digits."
        )
    return value
