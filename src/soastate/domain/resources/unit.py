"""Lifecycle of local units.

Unit identifiers are chosen by the caller and never change; a different
identifier means a new unit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from soastate.domain.errors import BusinessRuleFailure
from soastate.domain.model import Unit, UnitAttributes
from soastate.domain.nullable import to_optional
from soastate.domain.validation import require_valid, unit_violations

if TYPE_CHECKING:
    from soastate.domain.cache import EntityCache
    from soastate.domain.context import OperationContext
    from soastate.domain.ports import UnitGateway

log = logging.getLogger(__name__)


class UnitController:
    def __init__(self, gateway: UnitGateway, cache: EntityCache[Unit]) -> None:
        self.gateway = gateway
        self.cache = cache

    def create(self, ctx: OperationContext, attributes: UnitAttributes) -> Unit:
        require_valid(unit_violations(attributes))
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        if attributes.unit_id in self.cache:
            raise BusinessRuleFailure(f"unit {attributes.unit_id} already exists")

        unit = Unit(id=attributes.unit_id, description=attributes.description)
        self.gateway.insert(ctx, unit)
        self.cache.put(unit.id, unit)
        log.info("Created unit %s (%s)", unit.id, unit.description)
        return unit

    def read(self, ctx: OperationContext, unit_id: int) -> Unit | None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        return self.cache.get(unit_id)

    def update(
        self, ctx: OperationContext, unit_id: int, attributes: UnitAttributes
    ) -> Unit | None:
        require_valid(unit_violations(attributes))
        if attributes.unit_id != unit_id:
            raise BusinessRuleFailure(
                f"unit identifier is fixed: cannot change {unit_id} to {attributes.unit_id}"
            )
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)

        self.gateway.update(ctx, unit_id, to_optional(attributes.description))
        current = self.gateway.fetch(ctx, unit_id)
        if current is None:
            self.cache.remove(unit_id)
            return None
        self.cache.put(unit_id, current)
        log.info("Updated unit %s", unit_id)
        return current

    def delete(self, ctx: OperationContext, unit_id: int) -> None:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        self.gateway.delete(ctx, unit_id)
        self.cache.remove(unit_id)
        log.info("Deleted unit %s", unit_id)

    def list_all(self, ctx: OperationContext) -> list[Unit]:
        ctx.raise_if_cancelled()
        self.cache.ensure_loaded(ctx, self.gateway)
        return self.cache.values()
