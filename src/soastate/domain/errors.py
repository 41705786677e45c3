"""Failure kinds surfaced by the reconciliation core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ReconciliationError(RuntimeError):
    """Base class for every failure reported to the declarative engine."""


class ValidationError(ReconciliationError):
    """Raised when attributes fail shape checks; no statement was issued."""

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations = tuple(violations)
        super().__init__("; ".join(self.violations) or "invalid attributes")


class RemoteExecutionError(ReconciliationError):
    """Raised when the database call itself fails.

    The driver exception is always chained as ``__cause__``.
    """


class BusinessRuleFailure(ReconciliationError):
    """Raised when the database accepted the call but refused the change."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class OperationCancelledError(ReconciliationError):
    """Raised when the caller cancelled the operation."""
