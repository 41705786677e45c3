"""Resource controllers driving the create/read/update/delete lifecycle."""

from __future__ import annotations

from .department import DepartmentController
from .line import LineController
from .unit import UnitController

__all__ = ["DepartmentController", "LineController", "UnitController"]
