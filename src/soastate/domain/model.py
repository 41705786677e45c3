"""Remote entities as materialised records, plus the attributes the engine desires."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .nullable import NO_ID


class ResourceType(StrEnum):
    """Resource type names as registered with the declarative engine."""

    DEPARTMENT = "pa_department"
    LINE = "pa_line"
    UNIT = "pa_test_unit"


@dataclass(frozen=True, slots=True)
class Department:
    id: int
    description: str
    extended_info: str = ""
    time_zone: str = ""
    tag: str = ""


@dataclass(frozen=True, slots=True)
class Line:
    """A production line with its foreign references joined to display names."""

    id: int
    description: str
    department_id: int
    department: str = ""
    extended_info: str = ""
    external_link: str = ""
    security_group_id: int = NO_ID
    security_group: str = ""


@dataclass(frozen=True, slots=True)
class Unit:
    id: int
    description: str


# Desired state. Department and line identifiers are assigned by the database,
# so their attributes cannot carry one.


@dataclass(frozen=True, slots=True)
class DepartmentAttributes:
    description: str
    extended_info: str = ""
    time_zone: str = ""
    tag: str = ""


@dataclass(frozen=True, slots=True)
class LineAttributes:
    description: str
    department_id: int
    extended_info: str = ""
    external_link: str = ""
    security_group_id: int = NO_ID


@dataclass(frozen=True, slots=True)
class UnitAttributes:
    unit_id: int
    description: str


type Entity = Department | Line | Unit
