"""T-SQL batches wrapping the stored procedures.

pyodbc cannot bind OUTPUT parameters, so every batch declares local
variables for the return value and the assigned identifier and selects them
as a single row (``return_value``, ``identifier``) at the end.
"""

from __future__ import annotations

from typing import Final

from sqlalchemy import text

CREATE_DEPARTMENT: Final = text(
    """
    SET NOCOUNT ON;
    DECLARE @return_value INT, @dept_id INT;

    EXEC @return_value = [dbo].[spEM_CreateDepartment]
        @Description = :description,
        @User_Id = :user_id,
        @Dept_Id = @dept_id OUTPUT;

    IF @return_value = 0 AND @dept_id IS NOT NULL
        UPDATE dbo.Departments_Base
        SET Dept_Desc = ISNULL(:description, Dept_Desc),
            Extended_Info = ISNULL(:extended_info, Extended_Info),
            Time_Zone = ISNULL(:time_zone, Time_Zone),
            Tag = ISNULL(:tag, Tag)
        WHERE Dept_Id = @dept_id;

    SELECT @return_value AS return_value, @dept_id AS identifier;
    """
)

SAVE_LINE: Final = text(
    """
    SET NOCOUNT ON;
    DECLARE @return_value INT, @pl_id INT = :line_id;

    EXEC @return_value = [dbo].[spLocal_Provider_CreateLine]
        @Dept_Desc = :department_name,
        @PL_Desc = :description,
        @External_Link = :external_link,
        @Extended_Info = :extended_info,
        @Group_Desc = :security_group_name,
        @User_Id = :user_id,
        @PL_Id = @pl_id OUTPUT;

    SELECT @return_value AS return_value, @pl_id AS identifier;
    """
)

DROP_LINE: Final = text(
    """
    SET NOCOUNT ON;
    DECLARE @return_value INT;

    EXEC @return_value = [dbo].[spEM_DropLine]
        @PL_Id = :line_id,
        @User_Id = :user_id;

    SELECT @return_value AS return_value, NULL AS identifier;
    """
)
