"""Helpers shared by the resource controllers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from soastate.domain.errors import BusinessRuleFailure

if TYPE_CHECKING:
    from soastate.domain.ports import ProcedureOutcome

log = logging.getLogger(__name__)


def ensure_succeeded(outcome: ProcedureOutcome, action: str) -> None:
    """Raise unless the procedure returned status 0."""

    if not outcome.succeeded:
        log.warning("%s rejected with status %s", action, outcome.status)
        raise BusinessRuleFailure(
            f"{action}: stored procedure returned failure status {outcome.status}",
            status=outcome.status,
        )


def ensure_assigned(outcome: ProcedureOutcome, action: str) -> int:
    """Raise unless the procedure succeeded and assigned a nonzero identifier."""

    ensure_succeeded(outcome, action)
    if outcome.identifier is None or not outcome.assigned_identifier:
        log.warning("%s returned no identifier", action)
        raise BusinessRuleFailure(
            f"{action}: stored procedure returned status {outcome.status} "
            f"but no identifier ({outcome.identifier!r})",
            status=outcome.status,
        )
    return outcome.identifier
