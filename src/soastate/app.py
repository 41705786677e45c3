"""Provider wiring: one engine, one cache per entity type, one handler per resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine

from soastate.adapters.engine import DepartmentHandler, LineHandler, UnitHandler
from soastate.adapters.sqlalchemy import (
    SqlAlchemyDepartmentGateway,
    SqlAlchemyLineGateway,
    SqlAlchemyUnitGateway,
    StatementRunner,
)
from soastate.config import ConfigurationError, get_provider_config
from soastate.domain.cache import EntityCache
from soastate.domain.model import Department, Line, ResourceType, Unit
from soastate.domain.resources import DepartmentController, LineController, UnitController

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from soastate.adapters.engine import ResourceHandler
    from soastate.config import ProviderConfig

log = getLogger(__name__)


def build_engine(config: ProviderConfig) -> Engine:
    """Create the engine for ``config``; tables resolve into ``config.schema``."""

    engine = create_engine(config.database_url(), future=True, pool_pre_ping=True)
    if config.schema:
        return engine.execution_options(schema_translate_map={None: config.schema})
    return engine


@dataclass(slots=True)
class Provider:
    """Everything one provider process needs, owned explicitly rather than globally."""

    engine: Engine
    user_id: int = 1
    handlers: dict[ResourceType, ResourceHandler[Any, Any]] = field(init=False)

    def __post_init__(self) -> None:
        runner = StatementRunner(self.engine)
        departments = DepartmentController(
            SqlAlchemyDepartmentGateway(runner),
            EntityCache[Department]("department"),
            user_id=self.user_id,
        )
        lines = LineController(
            SqlAlchemyLineGateway(runner),
            EntityCache[Line]("line"),
            user_id=self.user_id,
        )
        units = UnitController(SqlAlchemyUnitGateway(runner), EntityCache[Unit]("unit"))
        self.handlers = {
            ResourceType.DEPARTMENT: DepartmentHandler(departments),
            ResourceType.LINE: LineHandler(lines),
            ResourceType.UNIT: UnitHandler(units),
        }

    def handler(self, resource_type: str) -> ResourceHandler[Any, Any]:
        try:
            return self.handlers[ResourceType(resource_type)]
        except ValueError as exc:
            known = ", ".join(sorted(self.handlers))
            raise ConfigurationError(
                f"Unknown resource type {resource_type!r}; expected one of: {known}"
            ) from exc

    def close(self) -> None:
        self.engine.dispose()


def build_provider(
    *,
    engine: Engine | None = None,
    config: ProviderConfig | None = None,
) -> Provider:
    """Build a provider from an explicit engine or from environment configuration."""

    if engine is not None:
        user_id = config.user_id if config is not None else 1
        return Provider(engine=engine, user_id=user_id)

    effective_config = config or get_provider_config()
    log.info(
        "Connecting to %s/%s as user id %s",
        effective_config.server or "DATABASE_URI",
        effective_config.database,
        effective_config.user_id,
    )
    return Provider(engine=build_engine(effective_config), user_id=effective_config.user_id)
