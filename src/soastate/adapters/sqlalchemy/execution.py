"""Cancellable statement execution on a SQLAlchemy engine."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from soastate.domain.errors import OperationCancelledError, RemoteExecutionError
from soastate.domain.ports import ProcedureOutcome

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql.elements import TextClause

    from soastate.domain.context import OperationContext

log = logging.getLogger(__name__)

_ACTIVE_CURSOR = "soastate_active_cursor"


def _remember_cursor(
    conn: Connection,
    cursor: Any,
    statement: str,
    parameters: Any,
    context: Any,
    executemany: bool,
) -> None:
    _ = statement, parameters, context, executemany
    conn.info[_ACTIVE_CURSOR] = cursor


def _forget_cursor(
    conn: Connection,
    cursor: Any,
    statement: str,
    parameters: Any,
    context: Any,
    executemany: bool,
) -> None:
    _ = cursor, statement, parameters, context, executemany
    conn.info.pop(_ACTIVE_CURSOR, None)


def _interrupt(connection: Connection) -> None:
    """Abort whatever the connection is executing right now."""

    cursor = connection.info.get(_ACTIVE_CURSOR)
    if cursor is not None and hasattr(cursor, "cancel"):
        # pyodbc
        cursor.cancel()
        return
    driver_connection = connection.connection.driver_connection
    if hasattr(driver_connection, "interrupt"):
        # sqlite3
        driver_connection.interrupt()


class StatementRunner:
    """Runs statements in short transactions tied to an :class:`OperationContext`.

    Driver failures surface as :class:`RemoteExecutionError`; anything that
    fails or finishes after the context was cancelled surfaces as
    :class:`OperationCancelledError` and its transaction is rolled back.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        if not event.contains(engine, "before_cursor_execute", _remember_cursor):
            event.listen(engine, "before_cursor_execute", _remember_cursor)
            event.listen(engine, "after_cursor_execute", _forget_cursor)

    @contextmanager
    def begin(self, ctx: OperationContext) -> Iterator[Connection]:
        ctx.raise_if_cancelled()
        try:
            with self.engine.begin() as connection, ctx.on_cancel(lambda: _interrupt(connection)):
                yield connection
                # do not commit work the caller no longer wants
                ctx.raise_if_cancelled()
        except SQLAlchemyError as exc:
            if ctx.cancelled:
                raise OperationCancelledError("statement interrupted by cancellation") from exc
            log.debug("Statement failed: %s", exc)
            raise RemoteExecutionError(str(exc)) from exc

    def call_procedure(
        self,
        ctx: OperationContext,
        batch: TextClause,
        params: Mapping[str, object],
    ) -> ProcedureOutcome:
        """Execute a procedure batch and read its ``return_value``/``identifier`` row."""

        with self.begin(ctx) as connection:
            row = connection.execute(batch, dict(params)).mappings().one()
        status = row["return_value"]
        identifier = row["identifier"]
        return ProcedureOutcome(
            status=None if status is None else int(status),
            identifier=None if identifier is None else int(identifier),
        )
