"""Domain port definitions for adapters."""

from __future__ import annotations

from .gateways import (
    DepartmentGateway,
    DepartmentParams,
    LineGateway,
    LineParams,
    ProcedureOutcome,
    UnitGateway,
)

__all__ = [
    "DepartmentGateway",
    "DepartmentParams",
    "LineGateway",
    "LineParams",
    "ProcedureOutcome",
    "UnitGateway",
]
