"""In-memory gateway fakes that record every remote call."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from soastate.domain.errors import RemoteExecutionError
from soastate.domain.model import Department, Line, Unit
from soastate.domain.nullable import NO_ID, from_optional
from soastate.domain.ports import DepartmentParams, LineParams, ProcedureOutcome

if TYPE_CHECKING:
    from soastate.domain.context import OperationContext


def _keep(value: str | None, current: str) -> str:
    return current if value is None else value


@dataclass
class FakeDepartmentGateway:
    rows: dict[int, Department] = field(default_factory=dict[int, Department])
    next_id: int = 100
    create_outcome: ProcedureOutcome | None = None
    load_error: Exception | None = None
    calls: list[tuple[str, object]] = field(default_factory=list[tuple[str, object]])

    @property
    def load_calls(self) -> int:
        return sum(1 for name, _ in self.calls if name == "load_all")

    def load_all(self, ctx: OperationContext) -> list[Department]:
        self.calls.append(("load_all", None))
        if self.load_error is not None:
            raise self.load_error
        return [self.rows[key] for key in sorted(self.rows, reverse=True)]

    def create(
        self, ctx: OperationContext, params: DepartmentParams, *, user_id: int
    ) -> ProcedureOutcome:
        self.calls.append(("create", params))
        if self.create_outcome is not None:
            return self.create_outcome
        department_id = self.next_id
        self.next_id += 1
        self.rows[department_id] = Department(
            id=department_id,
            description=from_optional(params.description),
            extended_info=from_optional(params.extended_info),
            time_zone=from_optional(params.time_zone),
            tag=from_optional(params.tag),
        )
        return ProcedureOutcome(status=0, identifier=department_id)

    def update(self, ctx: OperationContext, department_id: int, params: DepartmentParams) -> None:
        self.calls.append(("update", (department_id, params)))
        current = self.rows.get(department_id)
        if current is None:
            return
        self.rows[department_id] = replace(
            current,
            description=_keep(params.description, current.description),
            extended_info=_keep(params.extended_info, current.extended_info),
            time_zone=_keep(params.time_zone, current.time_zone),
            tag=_keep(params.tag, current.tag),
        )

    def fetch(self, ctx: OperationContext, department_id: int) -> Department | None:
        self.calls.append(("fetch", department_id))
        return self.rows.get(department_id)

    def delete(self, ctx: OperationContext, department_id: int) -> None:
        self.calls.append(("delete", department_id))
        self.rows.pop(department_id, None)


@dataclass
class FakeLineGateway:
    departments: dict[int, str] = field(default_factory=dict[int, str])
    groups: dict[int, str] = field(default_factory=dict[int, str])
    rows: dict[int, Line] = field(default_factory=dict[int, Line])
    next_id: int = 500
    save_outcome: ProcedureOutcome | None = None
    drop_outcome: ProcedureOutcome | None = None
    calls: list[tuple[str, object]] = field(default_factory=list[tuple[str, object]])

    saved: list[tuple[LineParams, int | None]] = field(
        default_factory=list[tuple[LineParams, int | None]]
    )

    def load_all(self, ctx: OperationContext) -> list[Line]:
        self.calls.append(("load_all", None))
        return [self.rows[key] for key in sorted(self.rows, reverse=True)]

    def department_name(self, ctx: OperationContext, department_id: int) -> str | None:
        self.calls.append(("department_name", department_id))
        return self.departments.get(department_id)

    def security_group_name(self, ctx: OperationContext, group_id: int) -> str | None:
        self.calls.append(("security_group_name", group_id))
        return self.groups.get(group_id)

    def _id_for(self, names: dict[int, str], name: str | None) -> int:
        for key, value in names.items():
            if value == name:
                return key
        return NO_ID

    def save(
        self,
        ctx: OperationContext,
        params: LineParams,
        *,
        line_id: int | None,
        user_id: int,
    ) -> ProcedureOutcome:
        self.calls.append(("save", line_id))
        self.saved.append((params, line_id))
        if self.save_outcome is not None:
            return self.save_outcome
        if line_id is None:
            line_id = self.next_id
            self.next_id += 1
            current = Line(id=line_id, description="", department_id=NO_ID)
        else:
            current = self.rows[line_id]
        group_id = self._id_for(self.groups, params.security_group_name)
        self.rows[line_id] = replace(
            current,
            description=_keep(params.description, current.description),
            department_id=self._id_for(self.departments, params.department_name),
            department=params.department_name,
            extended_info=_keep(params.extended_info, current.extended_info),
            external_link=_keep(params.external_link, current.external_link),
            security_group_id=group_id,
            security_group=from_optional(params.security_group_name),
        )
        return ProcedureOutcome(status=0, identifier=line_id)

    def fetch(self, ctx: OperationContext, line_id: int) -> Line | None:
        self.calls.append(("fetch", line_id))
        return self.rows.get(line_id)

    def drop(self, ctx: OperationContext, line_id: int, *, user_id: int) -> ProcedureOutcome:
        self.calls.append(("drop", line_id))
        if self.drop_outcome is not None:
            return self.drop_outcome
        self.rows.pop(line_id, None)
        return ProcedureOutcome(status=0)


@dataclass
class FakeUnitGateway:
    rows: dict[int, Unit] = field(default_factory=dict[int, Unit])
    calls: list[tuple[str, object]] = field(default_factory=list[tuple[str, object]])

    def load_all(self, ctx: OperationContext) -> list[Unit]:
        self.calls.append(("load_all", None))
        return [self.rows[key] for key in sorted(self.rows, reverse=True)]

    def insert(self, ctx: OperationContext, unit: Unit) -> None:
        self.calls.append(("insert", unit))
        if unit.id in self.rows:
            raise RemoteExecutionError(f"duplicate key {unit.id}")
        self.rows[unit.id] = unit

    def update(self, ctx: OperationContext, unit_id: int, description: str | None) -> None:
        self.calls.append(("update", (unit_id, description)))
        current = self.rows.get(unit_id)
        if current is not None:
            self.rows[unit_id] = replace(current, description=_keep(description, current.description))

    def fetch(self, ctx: OperationContext, unit_id: int) -> Unit | None:
        self.calls.append(("fetch", unit_id))
        return self.rows.get(unit_id)

    def delete(self, ctx: OperationContext, unit_id: int) -> None:
        self.calls.append(("delete", unit_id))
        self.rows.pop(unit_id, None)


class BlockingSource:
    """Entity source whose load waits until the test releases it."""

    def __init__(self, entities: list[Unit], *, error: Exception | None = None) -> None:
        self.entities = entities
        self.error = error
        self.calls = 0
        self.entered = threading.Event()
        self.release = threading.Event()
        self._lock = threading.Lock()

    def load_all(self, ctx: OperationContext) -> list[Unit]:
        with self._lock:
            self.calls += 1
        self.entered.set()
        self.release.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return list(self.entities)
