"""Lifecycle of production lines.

The line procedures identify the owning department and the security group by
their *descriptions*, not by identifier. The controller therefore resolves
both references before every create or update and hands the names to the
procedure. Deletes go through ``spEM_DropLine`` so the server can refuse
removals that would break referential rules.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from soastate.domain.errors import BusinessRuleFailure
from soastate.domain.model import Line, LineAttributes
from soastate.domain.nullable import from_optional, to_optional, to_optional_int
from soastate.domain.ports import LineParams
from soastate.domain.validation import line_violations, require_valid

from .base import ensure_assigned, ensure_succeeded

if TYPE_CHECKING:
    from soastate.domain.cache import EntityCache
    from soastate.domain.context import OperationContext
    from soastate.domain.ports import LineGateway

log = logging.getLogger(__name__)


class LineController:
    def __init__(
        self,
        gateway: LineGateway,
        cache: EntityCache[Line],
        *,
        user_id: int = 1,
    ) -> None:
        self.gateway = gateway
        self.cache = cache
        self.user_id = user_id

    def _resolve_names(
        self, ctx: OperationContext, attributes: LineAttributes
    ) -> tuple[str, str | None]:
        department_name = self.gateway.department_name(ctx, attributes.department_id)
        if department_name is None:
            raise BusinessRuleFailure(f"department {attributes.department_id} does not exist")

        group_id = to_optional_int(attributes.security_group_id)
        if group_id is None:
            return department_name, None
        group_name = self.gateway.security_group_name(ctx, group_id)
        if group_name is None:
            raise BusinessRuleFailure(f"security group {group_id} does not exist")
        return department_name, group_name

    def _params(self, ctx: OperationContext, attributes: LineAttributes) -> LineParams:
        department_name, group_name = self._resolve_names(ctx, attributes)
        log.debug(
            "Resolved department %s -> %r, security group %s -> %r",
            attributes.department_id,
            department_name,
            attributes.security_group_id,
            group_name,
        )
        return LineParams(
            description=to_optional(attributes.description),
            department_name=department_name,
            extended_info=to_optional(attributes.extended_info),
            external_link=to_optional(attributes.external_link),
            security_group_name=group_name,
        )

    def create(self, ctx: OperationContext, attributes: LineAttributes) -> Line:
        require_valid(line_violations(attributes))
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)

        params = self._params(ctx, attributes)
        outcome = self.gateway.save(ctx, params, line_id=None, user_id=self.user_id)
        line_id = ensure_assigned(outcome, "create line")

        line = Line(
            id=line_id,
            description=attributes.description,
            department_id=attributes.department_id,
            department=params.department_name,
            extended_info=attributes.extended_info,
            external_link=attributes.external_link,
            security_group_id=attributes.security_group_id,
            security_group=from_optional(params.security_group_name),
        )
        self.cache.put(line_id, line)
        log.info("Created line %s (%s) in %s", line_id, line.description, line.department)
        return line

    def read(self, ctx: OperationContext, line_id: int) -> Line | None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        line = self.cache.get(line_id)
        if line is None:
            log.debug("Line %s no longer exists", line_id)
        return line

    def update(
        self, ctx: OperationContext, line_id: int, attributes: LineAttributes
    ) -> Line | None:
        require_valid(line_violations(attributes))
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)

        params = self._params(ctx, attributes)
        outcome = self.gateway.save(ctx, params, line_id=line_id, user_id=self.user_id)
        ensure_succeeded(outcome, f"update line {line_id}")
        if outcome.assigned_identifier and outcome.identifier != line_id:
            log.warning("Update of line %s produced line %s", line_id, outcome.identifier)
            raise BusinessRuleFailure(
                f"update line {line_id}: procedure returned line {outcome.identifier}",
                status=outcome.status,
            )

        current = self.gateway.fetch(ctx, line_id)
        if current is None:
            self.cache.remove(line_id)
            log.info("Line %s vanished during update", line_id)
            return None
        self.cache.put(line_id, current)
        log.info("Updated line %s", line_id)
        return current

    def delete(self, ctx: OperationContext, line_id: int) -> None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        outcome = self.gateway.drop(ctx, line_id, user_id=self.user_id)
        ensure_succeeded(outcome, f"drop line {line_id}")
        self.cache.remove(line_id)
        log.info("Deleted line %s", line_id)

    def list_all(self, ctx: OperationContext) -> list[Line]:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        return self.cache.values()
