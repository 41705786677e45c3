"""Gateway implementations backed by a SQLAlchemy engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, literal, select, update

from soastate.adapters.sqlalchemy.statements import CREATE_DEPARTMENT, DROP_LINE, SAVE_LINE
from soastate.adapters.sqlalchemy.tables import (
    LINE_DELETED_MARKER,
    departments_base_table,
    departments_view,
    local_units_table,
    prod_lines_base_table,
    security_groups_table,
)
from soastate.domain.model import Department, Line, Unit
from soastate.domain.nullable import from_optional, from_optional_int

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Row, Select

    from soastate.adapters.sqlalchemy.execution import StatementRunner
    from soastate.domain.context import OperationContext
    from soastate.domain.ports import DepartmentParams, LineParams, ProcedureOutcome

    _DepartmentRow = tuple[int, str | None, str | None, str | None, str | None]
    _LineRow = tuple[
        int, str | None, str | None, str | None, int | None, str | None, int, str | None
    ]


def _coalesce(value: str | None, column: ColumnElement[str]) -> ColumnElement[str]:
    """``COALESCE(value, column)``: keep the stored value when nothing is provided."""

    return func.coalesce(literal(value, type_=column.type), column)


class SqlAlchemyDepartmentGateway:
    def __init__(self, runner: StatementRunner) -> None:
        self.runner = runner

    def _select(self) -> Select[_DepartmentRow]:
        view = departments_view.c
        return select(view.Dept_Id, view.Dept_Desc, view.Extended_Info, view.Time_Zone, view.Tag)

    @staticmethod
    def _materialise(row: Row[_DepartmentRow]) -> Department:
        dept_id, description, extended_info, time_zone, tag = row
        return Department(
            id=int(dept_id),
            description=from_optional(description),
            extended_info=from_optional(extended_info),
            time_zone=from_optional(time_zone),
            tag=from_optional(tag),
        )

    def load_all(self, ctx: OperationContext) -> list[Department]:
        view = departments_view.c
        stmt = self._select().where(view.Dept_Id >= 0).order_by(view.Dept_Id.desc())
        with self.runner.begin(ctx) as connection:
            return [self._materialise(row) for row in connection.execute(stmt)]

    def fetch(self, ctx: OperationContext, department_id: int) -> Department | None:
        view = departments_view.c
        stmt = self._select().where(view.Dept_Id == department_id, view.Dept_Id >= 0)
        with self.runner.begin(ctx) as connection:
            row = connection.execute(stmt).one_or_none()
        return None if row is None else self._materialise(row)

    def create(
        self, ctx: OperationContext, params: DepartmentParams, *, user_id: int
    ) -> ProcedureOutcome:
        return self.runner.call_procedure(
            ctx,
            CREATE_DEPARTMENT,
            {
                "description": params.description,
                "extended_info": params.extended_info,
                "time_zone": params.time_zone,
                "tag": params.tag,
                "user_id": user_id,
            },
        )

    def update(self, ctx: OperationContext, department_id: int, params: DepartmentParams) -> None:
        base = departments_base_table.c
        stmt = (
            update(departments_base_table)
            .where(base.Dept_Id == department_id, base.Dept_Id >= 0)
            .values(
                Dept_Desc=_coalesce(params.description, base.Dept_Desc),
                Extended_Info=_coalesce(params.extended_info, base.Extended_Info),
                Time_Zone=_coalesce(params.time_zone, base.Time_Zone),
                Tag=_coalesce(params.tag, base.Tag),
            )
        )
        with self.runner.begin(ctx) as connection:
            connection.execute(stmt)

    def delete(self, ctx: OperationContext, department_id: int) -> None:
        base = departments_base_table.c
        stmt = delete(departments_base_table).where(
            base.Dept_Id == department_id, base.Dept_Id >= 0
        )
        with self.runner.begin(ctx) as connection:
            connection.execute(stmt)


class SqlAlchemyLineGateway:
    def __init__(self, runner: StatementRunner) -> None:
        self.runner = runner

    def _select(self) -> Select[_LineRow]:
        line = prod_lines_base_table.c
        dept = departments_base_table.c
        group = security_groups_table.c
        return (
            select(
                line.PL_Id,
                line.PL_Desc,
                line.Extended_Info,
                line.External_Link,
                line.Group_Id,
                group.Group_Desc,
                dept.Dept_Id,
                dept.Dept_Desc,
            )
            .select_from(prod_lines_base_table)
            .join(departments_base_table, dept.Dept_Id == line.Dept_Id)
            .outerjoin(security_groups_table, group.Group_Id == line.Group_Id)
        )

    @staticmethod
    def _materialise(row: Row[_LineRow]) -> Line:
        (
            line_id,
            description,
            extended_info,
            external_link,
            group_id,
            group_desc,
            dept_id,
            dept_desc,
        ) = row
        return Line(
            id=int(line_id),
            description=from_optional(description),
            department_id=from_optional_int(dept_id),
            department=from_optional(dept_desc),
            extended_info=from_optional(extended_info),
            external_link=from_optional(external_link),
            security_group_id=from_optional_int(group_id),
            security_group=from_optional(group_desc),
        )

    def load_all(self, ctx: OperationContext) -> list[Line]:
        line = prod_lines_base_table.c
        stmt = (
            self._select()
            .where(line.PL_Id >= 0, line.PL_Desc != LINE_DELETED_MARKER)
            .order_by(line.PL_Id.desc())
        )
        with self.runner.begin(ctx) as connection:
            return [self._materialise(row) for row in connection.execute(stmt)]

    def fetch(self, ctx: OperationContext, line_id: int) -> Line | None:
        line = prod_lines_base_table.c
        stmt = self._select().where(
            line.PL_Id == line_id, line.PL_Id >= 0, line.PL_Desc != LINE_DELETED_MARKER
        )
        with self.runner.begin(ctx) as connection:
            row = connection.execute(stmt).one_or_none()
        return None if row is None else self._materialise(row)

    def department_name(self, ctx: OperationContext, department_id: int) -> str | None:
        dept = departments_base_table.c
        stmt = select(dept.Dept_Desc).where(dept.Dept_Id == department_id)
        with self.runner.begin(ctx) as connection:
            return connection.execute(stmt).scalar_one_or_none()

    def security_group_name(self, ctx: OperationContext, group_id: int) -> str | None:
        group = security_groups_table.c
        stmt = select(group.Group_Desc).where(group.Group_Id == group_id)
        with self.runner.begin(ctx) as connection:
            return connection.execute(stmt).scalar_one_or_none()

    def save(
        self,
        ctx: OperationContext,
        params: LineParams,
        *,
        line_id: int | None,
        user_id: int,
    ) -> ProcedureOutcome:
        return self.runner.call_procedure(
            ctx,
            SAVE_LINE,
            {
                "line_id": line_id,
                "department_name": params.department_name,
                "description": params.description,
                "external_link": params.external_link,
                "extended_info": params.extended_info,
                "security_group_name": params.security_group_name,
                "user_id": user_id,
            },
        )

    def drop(self, ctx: OperationContext, line_id: int, *, user_id: int) -> ProcedureOutcome:
        return self.runner.call_procedure(ctx, DROP_LINE, {"line_id": line_id, "user_id": user_id})


class SqlAlchemyUnitGateway:
    def __init__(self, runner: StatementRunner) -> None:
        self.runner = runner

    def load_all(self, ctx: OperationContext) -> list[Unit]:
        units = local_units_table.c
        stmt = (
            select(units.PU_Id, units.Description)
            .where(units.PU_Id >= 0)
            .order_by(units.PU_Id.desc())
        )
        with self.runner.begin(ctx) as connection:
            return [
                Unit(id=int(unit_id), description=from_optional(description))
                for unit_id, description in connection.execute(stmt)
            ]

    def fetch(self, ctx: OperationContext, unit_id: int) -> Unit | None:
        units = local_units_table.c
        stmt = select(units.PU_Id, units.Description).where(
            units.PU_Id == unit_id, units.PU_Id >= 0
        )
        with self.runner.begin(ctx) as connection:
            row = connection.execute(stmt).one_or_none()
        if row is None:
            return None
        return Unit(id=int(row.PU_Id), description=from_optional(row.Description))

    def insert(self, ctx: OperationContext, unit: Unit) -> None:
        stmt = insert(local_units_table).values(PU_Id=unit.id, Description=unit.description)
        with self.runner.begin(ctx) as connection:
            connection.execute(stmt)

    def update(self, ctx: OperationContext, unit_id: int, description: str | None) -> None:
        units = local_units_table.c
        stmt = (
            update(local_units_table)
            .where(units.PU_Id == unit_id, units.PU_Id >= 0)
            .values(Description=_coalesce(description, units.Description))
        )
        with self.runner.begin(ctx) as connection:
            connection.execute(stmt)

    def delete(self, ctx: OperationContext, unit_id: int) -> None:
        units = local_units_table.c
        stmt = delete(local_units_table).where(units.PU_Id == unit_id, units.PU_Id >= 0)
        with self.runner.begin(ctx) as connection:
            connection.execute(stmt)


if TYPE_CHECKING:
    from typing import cast

    from soastate.domain.ports import DepartmentGateway, LineGateway, UnitGateway

    _runner_stub = cast("StatementRunner", object())
    _department_check: DepartmentGateway = SqlAlchemyDepartmentGateway(_runner_stub)
    _line_check: LineGateway = SqlAlchemyLineGateway(_runner_stub)
    _unit_check: UnitGateway = SqlAlchemyUnitGateway(_runner_stub)
