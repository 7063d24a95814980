"""Logging setup for the pagefactory command line."""

from __future__ import annotations

import logging

SQL_LOGGER_NAME = "sqlalchemy.engine"


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    echo_sql: bool = False,
) -> None:
    """Configure the root logger for CLI output.

    SQLAlchemy's engine logger inherits the root level, so at DEBUG it would
    print every statement. It is held at WARNING unless ``echo_sql`` is set.
    ``force=True`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger(SQL_LOGGER_NAME).setLevel(logging.INFO if echo_sql else logging.WARNING)
