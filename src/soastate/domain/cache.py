"""Process-local read-through cache of remote entities.

One :class:`EntityCache` exists per entity type. It is filled by a single
full load and afterwards kept in step with the writes the controllers make;
it never re-queries on its own.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Protocol

from .errors import OperationCancelledError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .context import OperationContext

log = logging.getLogger(__name__)


class Identified(Protocol):
    @property
    def id(self) -> int: ...


class EntitySource[TEntity: Identified](Protocol):
    """Anything able to materialise every live entity of one type."""

    def load_all(self, ctx: OperationContext) -> Iterable[TEntity]: ...


class EntityCache[TEntity: Identified]:
    """Identifier -> entity mapping with an at-most-once concurrent load.

    The cache counts as loaded only after a load completed successfully, so a
    failed load is retried on the next access. Callers arriving while a load
    is running wait for it and share its outcome, including its error, except
    that a load abandoned because its owner was cancelled is taken over by the
    next waiter whose own context is still live.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[int, TEntity] = {}
        self._loaded = False
        self._pending: Future[None] | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        with self._lock:
            return self._loaded

    def ensure_loaded(self, ctx: OperationContext, source: EntitySource[TEntity]) -> None:
        while True:
            ctx.raise_if_cancelled()
            with self._lock:
                if self._loaded:
                    return
                pending = self._pending
                owner = pending is None
                if pending is None:
                    pending = self._pending = Future()

            if owner:
                break
            try:
                pending.result()
            except OperationCancelledError:
                # owner was cancelled; take over unless this caller was too
                continue
            return

        try:
            entries = {entity.id: entity for entity in source.load_all(ctx)}
        except BaseException as exc:
            with self._lock:
                self._pending = None
            pending.set_exception(exc)
            log.warning("Loading %s cache failed: %s", self.name, exc)
            raise

        with self._lock:
            self._entries = entries
            self._loaded = True
            self._pending = None
        pending.set_result(None)
        log.info("Loaded %d %s entries", len(entries), self.name)

    def get(self, entity_id: int) -> TEntity | None:
        with self._lock:
            return self._entries.get(entity_id)

    def put(self, entity_id: int, entity: TEntity) -> None:
        with self._lock:
            self._entries[entity_id] = entity

    def remove(self, entity_id: int) -> None:
        with self._lock:
            self._entries.pop(entity_id, None)

    def values(self) -> list[TEntity]:
        """Snapshot of the cached entities, highest identifier first."""

        with self._lock:
            return [self._entries[key] for key in sorted(self._entries, reverse=True)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._entries
