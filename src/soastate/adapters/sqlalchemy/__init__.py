"""SQLAlchemy adapter package for soastate."""

from __future__ import annotations

from .execution import StatementRunner
from .gateways import SqlAlchemyDepartmentGateway, SqlAlchemyLineGateway, SqlAlchemyUnitGateway
from .tables import (
    DEPARTMENTS_VIEW_DDL,
    departments_base_table,
    departments_view,
    local_units_table,
    metadata,
    prod_lines_base_table,
    security_groups_table,
)

__all__ = [
    "DEPARTMENTS_VIEW_DDL",
    "SqlAlchemyDepartmentGateway",
    "SqlAlchemyLineGateway",
    "SqlAlchemyUnitGateway",
    "StatementRunner",
    "departments_base_table",
    "departments_view",
    "local_units_table",
    "metadata",
    "prod_lines_base_table",
    "security_groups_table",
]
