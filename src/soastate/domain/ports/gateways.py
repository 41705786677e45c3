"""Ports for the database operations each resource controller needs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from soastate.domain.cache import EntitySource
from soastate.domain.model import Department, Line, Unit

if TYPE_CHECKING:
    from soastate.domain.context import OperationContext


@dataclass(frozen=True, slots=True)
class ProcedureOutcome:
    """Return status of a stored procedure and the identifier it assigned (if any)."""

    status: int | None
    identifier: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == 0

    @property
    def assigned_identifier(self) -> bool:
        return self.identifier is not None and self.identifier != 0


@dataclass(frozen=True, slots=True)
class DepartmentParams:
    """Nullable parameters; ``None`` keeps the stored column value."""

    description: str | None
    extended_info: str | None
    time_zone: str | None
    tag: str | None


@dataclass(frozen=True, slots=True)
class LineParams:
    """Parameters of the name-based line procedure."""

    description: str | None
    department_name: str
    extended_info: str | None
    external_link: str | None
    security_group_name: str | None


@runtime_checkable
class DepartmentGateway(EntitySource[Department], Protocol):
    def create(
        self, ctx: OperationContext, params: DepartmentParams, *, user_id: int
    ) -> ProcedureOutcome: ...

    def update(
        self, ctx: OperationContext, department_id: int, params: DepartmentParams
    ) -> None: ...

    def fetch(self, ctx: OperationContext, department_id: int) -> Department | None: ...

    def delete(self, ctx: OperationContext, department_id: int) -> None: ...


@runtime_checkable
class LineGateway(EntitySource[Line], Protocol):
    def department_name(self, ctx: OperationContext, department_id: int) -> str | None: ...

    def security_group_name(self, ctx: OperationContext, group_id: int) -> str | None: ...

    def save(
        self,
        ctx: OperationContext,
        params: LineParams,
        *,
        line_id: int | None,
        user_id: int,
    ) -> ProcedureOutcome:
        """Create (``line_id=None``) or update a line through the line procedure."""
        ...

    def fetch(self, ctx: OperationContext, line_id: int) -> Line | None: ...

    def drop(self, ctx: OperationContext, line_id: int, *, user_id: int) -> ProcedureOutcome: ...


@runtime_checkable
class UnitGateway(EntitySource[Unit], Protocol):
    def insert(self, ctx: OperationContext, unit: Unit) -> None: ...

    def update(self, ctx: OperationContext, unit_id: int, description: str | None) -> None: ...

    def fetch(self, ctx: OperationContext, unit_id: int) -> Unit | None: ...

    def delete(self, ctx: OperationContext, unit_id: int) -> None: ...
