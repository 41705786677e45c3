"""Logging setup for the provider process."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SQL_LOGGER: Final[str] = "sqlalchemy.engine"


def configure_logging(
    *,
    level: int = logging.INFO,
    echo_sql: bool = False,
    force: bool = False,
) -> None:
    """Initialise the root logger and decide whether emitted SQL is shown.

    Statement logging goes through SQLAlchemy's own ``sqlalchemy.engine``
    logger; it stays at WARNING unless ``echo_sql`` is set, whatever ``level``
    the rest of the process runs at.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if echo_sql else logging.WARNING)
