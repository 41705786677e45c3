from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from soastate.common import configure_logging
from soastate.common.logging import SQL_LOGGER

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_sql_logger() -> Iterator[None]:
    logger = logging.getLogger(SQL_LOGGER)
    previous = logger.level
    yield
    logger.setLevel(previous)


def test_sql_logging_is_quiet_by_default() -> None:
    configure_logging(level=logging.DEBUG)

    assert logging.getLogger(SQL_LOGGER).level == logging.WARNING


def test_echo_sql_enables_statement_logging() -> None:
    configure_logging(echo_sql=True)

    assert logging.getLogger(SQL_LOGGER).level == logging.INFO
