"""SQLAlchemy Core table metadata for the SOA database objects we touch.

Tables are declared without a schema. Production engines route them to
``dbo`` through ``schema_translate_map``; tests run them unqualified on
sqlite.
"""

from __future__ import annotations

from typing import Final

from sqlalchemy import Column, Integer, MetaData, String, Table, Unicode

LINE_DELETED_MARKER: Final[str] = "<PL Deleted>"

metadata = MetaData()

departments_base_table = Table(
    "Departments_Base",
    metadata,
    Column("Dept_Id", Integer, primary_key=True, autoincrement=False),
    Column("Dept_Desc", Unicode(50)),
    Column("Extended_Info", Unicode(255)),
    Column("Time_Zone", String(100)),
    Column("Tag", Unicode(255)),
)

security_groups_table = Table(
    "Security_Groups",
    metadata,
    Column("Group_Id", Integer, primary_key=True, autoincrement=False),
    Column("Group_Desc", Unicode(255)),
)

prod_lines_base_table = Table(
    "Prod_Lines_Base",
    metadata,
    Column("PL_Id", Integer, primary_key=True, autoincrement=False),
    Column("PL_Desc", Unicode(50)),
    Column("Dept_Id", Integer),
    Column("Extended_Info", Unicode(255)),
    Column("External_Link", Unicode(255)),
    Column("Group_Id", Integer),
)

local_units_table = Table(
    "Local_Units",
    metadata,
    Column("PU_Id", Integer, primary_key=True, autoincrement=False),
    Column("Description", Unicode(255)),
)

# Read-only view over Departments_Base. Kept out of ``metadata`` so that
# ``create_all`` never turns it into a table.
view_metadata = MetaData()

departments_view = Table(
    "Departments",
    view_metadata,
    Column("Dept_Id", Integer, primary_key=True),
    Column("Dept_Desc", Unicode(50)),
    Column("Extended_Info", Unicode(255)),
    Column("Time_Zone", String(100)),
    Column("Tag", Unicode(255)),
)

DEPARTMENTS_VIEW_DDL: Final[str] = (
    "CREATE VIEW Departments AS "
    "SELECT Dept_Id, Dept_Desc, Extended_Info, Time_Zone, Tag FROM Departments_Base"
)
