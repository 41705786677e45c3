"""Resource handlers: the surface the declarative engine talks to.

Each handler parses an attribute map, hands typed attributes to its
controller and returns the resulting :class:`ResourceState`. A ``None``
state means the remote entity is gone and the engine should drop its
identity binding.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Protocol

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from soastate.domain.context import OperationContext
from soastate.domain.errors import ValidationError
from soastate.domain.model import (
    Department,
    DepartmentAttributes,
    Line,
    LineAttributes,
    ResourceType,
    Unit,
    UnitAttributes,
)
from soastate.domain.nullable import from_identity

from .schema import DepartmentSchema, LineSchema, UnitSchema
from .translator import ResourceState, department_state, line_state, unit_state

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)


class ResourceController[TEntity, TAttributes](Protocol):
    def create(self, ctx: OperationContext, attributes: TAttributes) -> TEntity: ...

    def read(self, ctx: OperationContext, entity_id: int, /) -> TEntity | None: ...

    def update(
        self, ctx: OperationContext, entity_id: int, attributes: TAttributes, /
    ) -> TEntity | None: ...

    def delete(self, ctx: OperationContext, entity_id: int, /) -> None: ...

    def list_all(self, ctx: OperationContext) -> list[TEntity]: ...


def _context(ctx: OperationContext | None) -> OperationContext:
    return ctx if ctx is not None else OperationContext.background()


def _parse[TModel: BaseModel](schema: type[TModel], attributes: Mapping[str, object]) -> TModel:
    try:
        return schema.model_validate(dict(attributes))
    except PydanticValidationError as exc:
        violations = [
            f"{'.'.join(str(part) for part in error['loc']) or 'attributes'}: {error['msg']}"
            for error in exc.errors()
        ]
        raise ValidationError(violations) from exc


class ResourceHandler[TEntity, TAttributes](ABC):
    resource_type: ClassVar[ResourceType]

    def __init__(self, controller: ResourceController[TEntity, TAttributes]) -> None:
        self.controller = controller

    @abstractmethod
    def _attributes(self, attributes: Mapping[str, object]) -> TAttributes: ...

    @abstractmethod
    def _state(self, entity: TEntity) -> ResourceState: ...

    def create(
        self, attributes: Mapping[str, object], *, ctx: OperationContext | None = None
    ) -> ResourceState:
        entity = self.controller.create(_context(ctx), self._attributes(attributes))
        return self._state(entity)

    def read(self, identity: str, *, ctx: OperationContext | None = None) -> ResourceState | None:
        entity = self.controller.read(_context(ctx), from_identity(identity))
        return None if entity is None else self._state(entity)

    def update(
        self,
        identity: str,
        attributes: Mapping[str, object],
        *,
        ctx: OperationContext | None = None,
    ) -> ResourceState | None:
        entity = self.controller.update(
            _context(ctx),
            from_identity(identity),
            self._attributes(attributes),
        )
        return None if entity is None else self._state(entity)

    def delete(self, identity: str, *, ctx: OperationContext | None = None) -> None:
        self.controller.delete(_context(ctx), from_identity(identity))

    def import_state(
        self, identity: str, *, ctx: OperationContext | None = None
    ) -> ResourceState | None:
        """Adopt an existing remote entity knowing nothing but its identity."""

        state = self.read(identity, ctx=ctx)
        if state is None:
            log.warning("Cannot import %s %s: no such entity", self.resource_type, identity)
        return state

    def list_all(self, *, ctx: OperationContext | None = None) -> list[ResourceState]:
        entities = self.controller.list_all(_context(ctx))
        return [self._state(entity) for entity in entities]


class DepartmentHandler(ResourceHandler[Department, DepartmentAttributes]):
    resource_type = ResourceType.DEPARTMENT

    def _attributes(self, attributes: Mapping[str, object]) -> DepartmentAttributes:
        return _parse(DepartmentSchema, attributes).to_attributes()

    def _state(self, entity: Department) -> ResourceState:
        return department_state(entity)


class LineHandler(ResourceHandler[Line, LineAttributes]):
    resource_type = ResourceType.LINE

    def _attributes(self, attributes: Mapping[str, object]) -> LineAttributes:
        return _parse(LineSchema, attributes).to_attributes()

    def _state(self, entity: Line) -> ResourceState:
        return line_state(entity)


class UnitHandler(ResourceHandler[Unit, UnitAttributes]):
    resource_type = ResourceType.UNIT

    def _attributes(self, attributes: Mapping[str, object]) -> UnitAttributes:
        return _parse(UnitSchema, attributes).to_attributes()

    def _state(self, entity: Unit) -> ResourceState:
        return unit_state(entity)
