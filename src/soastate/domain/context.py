"""Caller-supplied cancellation context for a single operation."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from .errors import OperationCancelledError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

log = logging.getLogger(__name__)


class OperationContext:
    """Carries the cancellation signal of one CRUD call.

    ``cancel`` may be called from any thread. Adapters register interrupt
    callbacks with :meth:`on_cancel` while a statement is in flight so the
    driver aborts it instead of letting it run to completion.
    """

    def __init__(self) -> None:
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []

    @classmethod
    def background(cls) -> OperationContext:
        """Return a context nobody holds a handle to cancel."""

        return cls()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks = list(self._callbacks)
        for callback in callbacks:
            try:
                callback()
            except Exception:
                # an interrupt that fails must not stop the others
                log.exception("Cancellation callback %r failed", callback)

    def raise_if_cancelled(self) -> None:
        if self._cancelled.is_set():
            raise OperationCancelledError("operation cancelled by caller")

    @contextmanager
    def on_cancel(self, callback: Callable[[], None]) -> Iterator[None]:
        """Run ``callback`` if the context is cancelled while the block executes."""

        with self._lock:
            already_cancelled = self._cancelled.is_set()
            if not already_cancelled:
                self._callbacks.append(callback)
        if already_cancelled:
            callback()
        try:
            yield
        finally:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)
