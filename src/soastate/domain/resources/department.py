"""Lifecycle of departments.

Departments are created through ``spEM_CreateDepartment``, which assigns the
identifier; the remaining columns are filled in with apply-if-present
semantics. Updates and deletes are plain statements.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from soastate.domain.model import Department, DepartmentAttributes
from soastate.domain.nullable import to_optional
from soastate.domain.ports import DepartmentParams
from soastate.domain.validation import department_violations, require_valid

from .base import ensure_assigned

if TYPE_CHECKING:
    from soastate.domain.cache import EntityCache
    from soastate.domain.context import OperationContext
    from soastate.domain.ports import DepartmentGateway

log = logging.getLogger(__name__)


def _params(attributes: DepartmentAttributes) -> DepartmentParams:
    return DepartmentParams(
        description=to_optional(attributes.description),
        extended_info=to_optional(attributes.extended_info),
        time_zone=to_optional(attributes.time_zone),
        tag=to_optional(attributes.tag),
    )


class DepartmentController:
    def __init__(
        self,
        gateway: DepartmentGateway,
        cache: EntityCache[Department],
        *,
        user_id: int = 1,
    ) -> None:
        self.gateway = gateway
        self.cache = cache
        self.user_id = user_id

    def create(self, ctx: OperationContext, attributes: DepartmentAttributes) -> Department:
        require_valid(department_violations(attributes))
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)

        outcome = self.gateway.create(ctx, _params(attributes), user_id=self.user_id)
        department_id = ensure_assigned(outcome, "create department")

        department = Department(
            id=department_id,
            description=attributes.description,
            extended_info=attributes.extended_info,
            time_zone=attributes.time_zone,
            tag=attributes.tag,
        )
        self.cache.put(department_id, department)
        log.info("Created department %s (%s)", department_id, attributes.description)
        return department

    def read(self, ctx: OperationContext, department_id: int) -> Department | None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        department = self.cache.get(department_id)
        if department is None:
            log.debug("Department %s no longer exists", department_id)
        return department

    def update(
        self,
        ctx: OperationContext,
        department_id: int,
        attributes: DepartmentAttributes,
    ) -> Department | None:
        require_valid(department_violations(attributes))
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)

        self.gateway.update(ctx, department_id, _params(attributes))
        current = self.gateway.fetch(ctx, department_id)
        if current is None:
            self.cache.remove(department_id)
            log.info("Department %s vanished during update", department_id)
            return None
        self.cache.put(department_id, current)
        log.info("Updated department %s", department_id)
        return current

    def delete(self, ctx: OperationContext, department_id: int) -> None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        self.gateway.delete(ctx, department_id)
        self.cache.remove(department_id)
        log.info("Deleted department %s", department_id)

    def list_all(self, ctx: OperationContext) -> list[Department]:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        return self.cache.values()
