"""Attribute shape rules checked before any remote call.

Every validator returns a list of violation messages; an empty list means
the value is acceptable.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from .errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import DepartmentAttributes, LineAttributes, UnitAttributes

TITLE_MAX_LENGTH: Final[int] = 50
VARCHAR_MAX_LENGTH: Final[int] = 255
TITLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[\w\-\(\)]+( [\w\-\(\)]+)*$", re.ASCII
)
TIME_ZONES: Final[tuple[str, ...]] = ("Eastern Standard Time", "Pacific Standard Time", "UTC")


def validate_title(value: str, key: str) -> list[str]:
    violations: list[str] = []
    if len(value) > TITLE_MAX_LENGTH:
        violations.append(f"{key!r} must be {TITLE_MAX_LENGTH} characters or fewer")
    if not TITLE_PATTERN.fullmatch(value):
        violations.append(
            f"{key!r} can only contain alphanumeric characters, spaces, dashes (-), "
            "underscores (_), and parentheses (), and must not start or end with spaces"
        )
    return violations


def validate_varchar255(value: str, key: str) -> list[str]:
    if len(value) > VARCHAR_MAX_LENGTH:
        return [f"{key!r} must be less than or equal to {VARCHAR_MAX_LENGTH} characters, or empty"]
    return []


def validate_time_zone(value: str, key: str) -> list[str]:
    if value not in TIME_ZONES:
        expected = ", ".join(repr(zone) for zone in TIME_ZONES)
        return [f"expected {key!r} to be one of [{expected}], got {value!r}"]
    return []


def validate_identifier(value: int, key: str) -> list[str]:
    if value < 0:
        return [f"{key!r} must be a non-negative identifier, got {value}"]
    return []


def department_violations(attributes: DepartmentAttributes) -> list[str]:
    violations = validate_title(attributes.description, "description")
    violations += validate_varchar255(attributes.extended_info, "extended_info")
    # time zone is optional; an empty value keeps whatever is stored
    if attributes.time_zone:
        violations += validate_time_zone(attributes.time_zone, "time_zone")
    violations += validate_varchar255(attributes.tag, "tag")
    return violations


def line_violations(attributes: LineAttributes) -> list[str]:
    violations = validate_title(attributes.description, "description")
    violations += validate_identifier(attributes.department_id, "department_id")
    violations += validate_varchar255(attributes.extended_info, "extended_info")
    violations += validate_varchar255(attributes.external_link, "external_link")
    return violations


def unit_violations(attributes: UnitAttributes) -> list[str]:
    violations = validate_identifier(attributes.unit_id, "unit_id")
    violations += validate_title(attributes.description, "description")
    return violations


def require_valid(violations: Iterable[str]) -> None:
    """Raise :class:`ValidationError` if any violation was collected."""

    collected = list(violations)
    if collected:
        raise ValidationError(collected)
