"""SQLAlchemy adapter package for the page factory association store."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyFieldRepository,
    SqlAlchemyLayoutRepository,
    SqlAlchemyPartRepository,
)
from .unit_of_work import (
    SqlAlchemyReconciliationUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyFieldRepository",
    "SqlAlchemyLayoutRepository",
    "SqlAlchemyPartRepository",
    "SqlAlchemyReconciliationUnitOfWork",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
