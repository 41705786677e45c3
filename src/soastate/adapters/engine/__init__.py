"""Boundary between the declarative engine's attribute maps and the controllers."""

from __future__ import annotations

from .handlers import DepartmentHandler, LineHandler, ResourceHandler, UnitHandler
from .translator import ResourceState

__all__ = ["DepartmentHandler", "LineHandler", "ResourceHandler", "ResourceState", "UnitHandler"]
