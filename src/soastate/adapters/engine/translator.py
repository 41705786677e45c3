"""Translate materialised entities into engine attribute maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from soastate.domain.nullable import to_identity

if TYPE_CHECKING:
    from soastate.domain.model import Department, Line, Unit


@dataclass(frozen=True, slots=True)
class ResourceState:
    """Identity binding plus the attributes the engine records for it."""

    identity: str
    attributes: dict[str, object]


def department_state(department: Department) -> ResourceState:
    return ResourceState(
        identity=to_identity(department.id),
        attributes={
            "dept_id": department.id,
            "description": department.description,
            "extended_info": department.extended_info,
            "time_zone": department.time_zone,
            "tag": department.tag,
        },
    )


def line_state(line: Line) -> ResourceState:
    return ResourceState(
        identity=to_identity(line.id),
        attributes={
            "line_id": line.id,
            "description": line.description,
            "department_id": line.department_id,
            "department": line.department,
            "extended_info": line.extended_info,
            "external_link": line.external_link,
            "security_group_id": line.security_group_id,
            "security_group": line.security_group,
        },
    )


def unit_state(unit: Unit) -> ResourceState:
    return ResourceState(
        identity=to_identity(unit.id),
        attributes={"pu_id": unit.id, "description": unit.description},
    )
