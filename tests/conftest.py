from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Table, create_engine, insert
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from soastate.adapters.sqlalchemy import (
    DEPARTMENTS_VIEW_DDL,
    StatementRunner,
    departments_base_table,
    local_units_table,
    metadata,
    prod_lines_base_table,
    security_groups_table,
)
from soastate.domain.context import OperationContext

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def ctx() -> OperationContext:
    return OperationContext()


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    metadata.create_all(engine)
    with engine.begin() as connection:
        connection.exec_driver_sql(DEPARTMENTS_VIEW_DDL)
    try:
        yield engine
    finally:
        engine.dispose()


def _rows(table: Table, *rows: dict[str, object]) -> list[dict[str, object]]:
    """Fill missing columns with NULL so every row binds the same parameters."""

    return [{column.name: row.get(column.name) for column in table.columns} for row in rows]


@pytest.fixture
def seeded_engine(sqlite_engine: Engine) -> Engine:
    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(departments_base_table),
            _rows(
                departments_base_table,
                {"Dept_Id": 25, "Dept_Desc": "Manufacturing", "Time_Zone": "UTC"},
                {
                    "Dept_Id": 30,
                    "Dept_Desc": "Finance Ops",
                    "Extended_Info": "second floor",
                    "Time_Zone": "Eastern Standard Time",
                    "Tag": "fin",
                },
                {"Dept_Id": -1, "Dept_Desc": "<None>"},
            ),
        )
        connection.execute(
            insert(security_groups_table),
            _rows(security_groups_table, {"Group_Id": 7, "Group_Desc": "Operators"}),
        )
        connection.execute(
            insert(prod_lines_base_table),
            _rows(
                prod_lines_base_table,
                {
                    "PL_Id": 10,
                    "PL_Desc": "Line-1",
                    "Dept_Id": 25,
                    "Extended_Info": "packaging",
                    "External_Link": "https://example.com/line-1",
                    "Group_Id": 7,
                },
                {"PL_Id": 11, "PL_Desc": "Line-2", "Dept_Id": 25},
                {"PL_Id": 12, "PL_Desc": "<PL Deleted>", "Dept_Id": 25},
                {"PL_Id": 13, "PL_Desc": "Orphan", "Dept_Id": 99},
                {"PL_Id": -1, "PL_Desc": "Template", "Dept_Id": 25},
            ),
        )
        connection.execute(
            insert(local_units_table),
            _rows(
                local_units_table,
                {"PU_Id": 1, "Description": "Filler"},
                {"PU_Id": 2, "Description": "Capper"},
            ),
        )
    return sqlite_engine


@pytest.fixture
def runner(sqlite_engine: Engine) -> StatementRunner:
    return StatementRunner(sqlite_engine)
